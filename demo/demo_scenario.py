#!/usr/bin/env python3
"""
Demo scenario for the Registrar record store.
"""

import io
import json
import os
import sys

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from registrar.main import Registrar


SCENARIO = """\
ADD_STUDENT 1 John ComputerScience
ADD_STUDENT 1 John ComputerScience
ADD_STUDENT 2 J0hn ComputerScience
ADD_STUDENT 3 Alice DataScience
ADD_STUDENT 4 Bob Astrology
ADD_EXAM 10 WRITTEN Midterm
ADD_EXAM 11 ORAL Final
ADD_GRADE 10 1 85
ADD_GRADE 10 3 101
ADD_GRADE 12 3 70
SEARCH_GRADE 10 1
UPDATE_GRADE 10 1 90
UPDATE_EXAM 11 ORAL Final
UPDATE_EXAM 11 DIGITAL Final
SEARCH_GRADE 10 1
LIST_ALL_STUDENTS
DELETE_STUDENT 1
SEARCH_STUDENT 1
SEARCH_GRADE 10 1
ADD_GRADE ten 3 50
FOO 1 2 3
END
SEARCH_STUDENT 3
"""


def run_demo():
    """Run the demo command file and show each response."""
    print("=" * 60)
    print("REGISTRAR RECORD STORE - DEMO")
    print("=" * 60)

    registrar = Registrar()
    output = io.StringIO()

    try:
        print("\n1. Running commands...")
        processed = registrar.run(SCENARIO.splitlines(keepends=True), output)
        print(f"  Processed {processed} command(s)")

        print("\n2. Responses:")
        for line in output.getvalue().splitlines():
            print(f"  {line}")

        print("\n3. Store contents:")
        print(json.dumps(registrar.store.snapshot(), indent=2))
        print(f"  Statistics: {registrar.store.get_statistics()}")

        print("\n" + "=" * 60)
        print("DEMO COMPLETED SUCCESSFULLY!")
        print("=" * 60)

    except Exception as e:
        print(f"\nDemo failed with error: {e}")
        import traceback
        traceback.print_exc()


if __name__ == "__main__":
    run_demo()
