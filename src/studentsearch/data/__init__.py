"""Record collection providers: CSV files and generated samples."""

from studentsearch.data.csv_loader import load_records_csv, save_records_csv
from studentsearch.data.sample_generator import generate_sample_students

__all__ = [
    "generate_sample_students",
    "load_records_csv",
    "save_records_csv",
]
