"""Deterministic sample student collection."""

from __future__ import annotations

import random
from typing import List

from studentsearch.core.records import StudentRecord
from studentsearch.utils.logging import get_logger

logger = get_logger(__name__)

FIRST_NAMES = (
    "Aarav", "Vivaan", "Aditya", "Arjun", "Rohan", "Ravi", "Nikhil", "Karan",
    "Rahul", "Amit", "Vikram", "Sanjay", "Deepak", "Prakash", "Suresh", "Rajesh",
    "Akshay", "Rohit", "Manish", "Naveen", "Priya", "Anjali", "Sneha", "Pooja",
    "Neha", "Divya", "Swati", "Shreya", "Kavya", "Ananya", "Diya", "Nisha",
    "Sakshi", "Riya", "Aisha", "Sophia", "Emma", "Olivia", "Ava", "Isabella",
    "Mia", "Charlotte", "Amelia", "Harper", "Evelyn", "Abigail", "Ella", "Madison",
    "John", "Michael", "David", "Robert", "James", "Richard", "Joseph", "Thomas",
    "Charles", "Daniel", "Matthew", "Mark", "Donald", "George", "Kenneth", "Steven",
    "Paul", "Andrew", "Joshua", "Edward", "Kevin", "Ronald", "Anthony", "Frank",
    "Ryan", "Gary", "Nicholas", "Eric", "Jonathan", "Stephen", "Larry", "Justin",
    "Scott", "Brandon", "Benjamin", "Samuel", "Raymond", "Gregory", "Alexander",
    "Patrick", "Jack", "Dennis", "Jerry", "Tyler", "Aaron", "Jose", "Adam",
    "Henry", "Douglas", "Zachary", "Peter", "Kyle", "Walter", "Harold", "Keith",
    "Christian", "Terry", "Sean", "Gerald", "Austin", "Carl",
)

LAST_NAMES = (
    "Singh", "Kumar", "Patel", "Sharma", "Gupta", "Verma", "Rao", "Nair",
    "Menon", "Iyer", "Bhat", "Reddy", "Chopra", "Bansal", "Joshi", "Mishra",
    "Pandey", "Sinha", "Trivedi", "Bhatt", "Smith", "Johnson", "Williams", "Brown",
    "Jones", "Garcia", "Miller", "Davis", "Rodriguez", "Martinez", "Hernandez", "Lopez",
    "Gonzalez", "Wilson", "Anderson", "Thomas", "Taylor", "Moore", "Jackson", "Martin",
    "Lee", "Perez", "Thompson", "White", "Harris", "Sanchez", "Clark", "Ramirez",
    "Lewis", "Robinson", "Walker", "Young", "Allen", "King", "Wright", "Scott",
    "Torres", "Peterson", "Phillips", "Campbell", "Parker", "Evans", "Edwards", "Collins",
    "Reeves", "Stewart", "Morris", "Morales", "Murphy", "Cook", "Rogers", "Gutierrez",
    "Ortiz", "Morgan", "Cooper", "Gray", "Rice", "Crawford", "Henry", "Boyd",
    "Mason", "Moreno", "Kennedy", "Warren", "Dixon", "Ramos", "Reyes", "Burns",
    "Gordon", "Shaw", "Holmes", "Robertson", "Hunt",
)

SCHOOLS = (
    "Delhi Public School", "Doon School", "Mayo College", "The Cathedral School",
    "Rajkumar College", "Modern School", "Delhi Public School Vasant Kunj",
    "Sanskriti School", "Springdales School", "Salwan Public School",
    "Bluebells International School", "Amity International School",
    "Invictus School", "North Point School", "La Martinière for Girls",
    "Bishop Cotton School", "St. Stephen's School", "Sherwood College",
    "Welham Schools", "Tara Academy", "Heritage School", "Pathways School",
    "Presidium School", "Apple Core Academy", "Ryan International School",
    "Candor International School", "Chitrakoot International School",
    "Delhi Public School Sector 45", "Indian Public School", "Vidyarambha School",
)

SUBJECTS = (
    "Mathematics", "Physics", "Chemistry", "Biology", "English",
    "Hindi", "History", "Geography", "Science", "Computer Science",
    "Economics", "Political Science", "Sociology", "Psychology",
    "Art", "Physical Education", "Music", "Sanskrit", "French",
    "German", "Accountancy", "Business Studies", "Information Technology",
)

CITIES = (
    "Delhi", "Mumbai", "Bangalore", "Pune", "Chennai", "Kolkata",
    "Hyderabad", "Ahmedabad", "Jaipur", "Lucknow", "Indore", "Surat",
    "Chandigarh", "Vadodara", "Gurgaon", "Noida", "Faridabad", "Bhopal",
    "New York", "Los Angeles", "Chicago", "Houston", "Phoenix", "Philadelphia",
    "San Antonio", "San Diego", "Dallas", "San Jose", "Austin", "Jacksonville",
)

STREET_NAMES = (
    "Main Street", "Oak Avenue", "Maple Drive", "Pine Road", "Elm Street",
    "Cedar Lane", "Birch Court", "Willow Way", "Ash Boulevard", "Spruce Circle",
    "Market Street", "Park Avenue", "Garden Road", "Lake Drive", "Hill Street",
    "River Road", "Valley Lane", "Mountain View", "Forest Path", "Spring Lane",
)

# Cumulative percentage thresholds: 30% A, 40% B, 20% C, 5% D, 5% F
_GRADE_THRESHOLDS = ((30, "A"), (70, "B"), (90, "C"), (95, "D"), (100, "F"))


def _draw_grade(rng: random.Random) -> str:
    roll = rng.randrange(100)
    for threshold, grade in _GRADE_THRESHOLDS:
        if roll < threshold:
            return grade
    return "F"


def generate_sample_students(count: int = 100, seed: int = 42) -> List[StudentRecord]:
    """Generate a reproducible collection of sample students.

    Args:
        count: Number of records; ids run from 1 to ``count``
        seed: Random seed, the same seed always yields the same records

    Returns:
        List of StudentRecord in id order

    Example:
        >>> students = generate_sample_students(10)
        >>> students[0].id
        1
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    rng = random.Random(seed)
    students = []

    for student_id in range(1, count + 1):
        first_name = rng.choice(FIRST_NAMES)
        last_name = rng.choice(LAST_NAMES)
        city = rng.choice(CITIES)
        street = rng.choice(STREET_NAMES)
        house_number = rng.randint(1, 998)
        school = rng.choice(SCHOOLS)
        subject = rng.choice(SUBJECTS)

        students.append(
            StudentRecord(
                id=student_id,
                name=f"{first_name} {last_name}",
                address=f"{house_number} {street}, {city}",
                school=school,
                subject=subject,
                grade=_draw_grade(rng),
            )
        )

    logger.debug(f"Generated {len(students)} sample students (seed={seed})")
    return students
