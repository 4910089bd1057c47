#!/usr/bin/env python3
"""
Sample Data Script

Inserts fake applications spread over the last 60 days so the dashboard
charts and trends have something to show.
Run: python scripts/seed_sample_data.py [count]
"""
import random
import sys
sys.path.insert(0, '.')

from datetime import timedelta

from recruitment_dashboard.core import errors
from recruitment_dashboard.db.mongodb import test_mongo_connection, init_mongo_indexes
from recruitment_dashboard.schemas.schemas import Branch, YearOfStudy
from recruitment_dashboard.services.recruitment_store import RecruitmentStore, utcnow
from recruitment_dashboard.services.validation import validate_application

FIRST_NAMES = ["Asha", "Vikram", "Nisha", "Rahul", "Divya", "Karthik", "Meera", "Arjun"]
LAST_NAMES = ["Rao", "Shetty", "Nair", "Iyer", "Kumar", "Hegde", "Patil", "Reddy"]


def sample_application(i: int) -> dict:
    year = random.choice(list(YearOfStudy))
    if year is YearOfStudy.first:
        college_id = f"25ABCD{i:04d}"
    else:
        college_id = f"1DS{random.randint(1, 3)}{random.randint(0, 9)}CS{i % 1000:03d}"
    first, last = random.choice(FIRST_NAMES), random.choice(LAST_NAMES)
    return {
        "name": f"{first} {last}",
        "email": f"{first}.{last}.{i}@gmail.com".lower(),
        "whatsapp_number": f"9{i:09d}",
        "college_id": college_id,
        "year_of_study": year.value,
        "branch": random.choice(list(Branch)).value,
        "about": f"Hi, I'm {first}. I like building side projects and want to join the team.",
    }


def main():
    count = int(sys.argv[1]) if len(sys.argv) > 1 else 100

    if not test_mongo_connection():
        print("❌ MongoDB connection failed!")
        return
    init_mongo_indexes()

    store = RecruitmentStore()
    now = utcnow()
    inserted = skipped = 0

    for i in range(count):
        application = validate_application(sample_application(i))
        created_at = now - timedelta(days=random.uniform(0, 60))
        try:
            store.insert(application.model_dump(mode="json"), now=created_at)
            inserted += 1
        except errors.DuplicateKeyError:
            skipped += 1

    print(f"✅ Inserted {inserted} applications ({skipped} duplicates skipped)")


if __name__ == "__main__":
    main()
