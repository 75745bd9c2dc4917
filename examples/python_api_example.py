"""Python API usage examples for StudentSearch."""

from studentsearch import SearchContext, generate_sample_students


# Example 1: Relevance search
def example_semantic_search(context):
    """Rank students against a free-text query."""
    print("Example 1: Semantic Search")
    print("=" * 60)

    for hit in context.engine.semantic_search("delhi public school physics", top_k=5):
        print(f"  #{hit.rank} {hit.record.name:<24} {hit.record.subject:<20} score={hit.score:.3f}")


# Example 2: Filters on top of ranking
def example_filtered_search(context):
    """Combine a query with grade and subject filters."""
    print("\n\nExample 2: Filtered Search")
    print("=" * 60)

    results = context.engine.search_with_filters(
        "mumbai", passed_filter=True, category_filter=True, max_results=10
    )
    print(f"Passed science students, ranked for 'mumbai': {len(results)}")
    for record in results:
        print(f"  {record}")


# Example 3: Plain listings
def example_listings(context):
    """Scan filters keep storage order."""
    print("\n\nExample 3: Listings")
    print("=" * 60)

    engine = context.engine
    print(f"Total students: {engine.record_count()}")
    print(f"Passed (first 50): {len(engine.search_passed(50))}")
    print(f"Failed (first 50): {len(engine.search_failed(50))}")
    print(f"Science (first 50): {len(engine.search_science(50))}")


if __name__ == "__main__":
    search_context = SearchContext.from_records(generate_sample_students(100))

    example_semantic_search(search_context)
    example_filtered_search(search_context)
    example_listings(search_context)
