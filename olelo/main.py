import time

from olelo.dictionary import Dictionary
from olelo.generator import sample_records
from olelo.log import setup_logging


def run_demo():
    print("--- Olelo dictionary demo ---")
    dictionary = Dictionary()

    start_time = time.time()
    for record in sample_records():
        dictionary.insert(record)
    end_time = time.time()

    print(f"Indexed {len(dictionary)} phrases in {end_time - start_time:.4f}s "
          f"(tree height {dictionary.index.height()})")

    for record in dictionary:
        print(record)
        print()

    first = dictionary.first()
    last = dictionary.last()
    if first is None:
        print("No phrases loaded.")
        return

    print(f"First: {first.text}")
    print(f"Last: {last.text}")

    after_first = dictionary.next(first.text)
    before_last = dictionary.previous(last.text)
    print(f"Successor of {first.text!r}: {after_first.text if after_first else None}")
    print(f"Predecessor of {last.text!r}: {before_last.text if before_last else None}")

    matches = dictionary.search("Earth", field="translated")
    print(f"Translations containing 'Earth' -> {len(matches)} phrases")
    for rec in matches:
        print(f"  - {rec.text}: {rec.translation}")


if __name__ == "__main__":
    setup_logging()
    run_demo()
