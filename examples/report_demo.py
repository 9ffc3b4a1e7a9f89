#!/usr/bin/env python3
"""
Demonstration of entity extraction and report rendering.

This script shows how the classifier scans a document and how the
same result renders in each report format.
"""

from org_person_extractor import EntityClassifier, extract_entities, render_report


def main():
    """Demonstrate extraction and reporting."""
    print("Org/Person Extractor - Report Demo")
    print("=" * 50)
    print()

    print("Example 1: One sentence")
    print("-" * 50)
    text = "The deal between Mr. John Smith and Acme corp was signed."
    result = extract_entities(text)
    print(f"Input: {text}")
    print(f"Organizations: {list(result.organizations)}")
    print(f"Personalities: {list(result.personalities)}")
    print()

    print("Example 2: Spans found sentence by sentence")
    print("-" * 50)
    classifier = EntityClassifier()
    document = (
        "Директор ООО Ромашка г-н Иванов И. И. подписал договор. "
        "Компания Microcorp и Acme corp ltd объявили о слиянии! "
        "John Smith и Анна Петрова из Инкомбанка встретились с проф. Сидоровым."
    )
    classifier.analyze(document)
    print(f"{'Name':<30} {'Kind':<15}")
    print("-" * 45)
    results = classifier.get_results()
    for name in results.organizations:
        print(f"{name:<30} {'organization':<15}")
    for name in results.personalities:
        print(f"{name:<30} {'person':<15}")
    print()

    print("Example 3: Report formats")
    print("-" * 50)
    for fmt in ("table", "text", "csv", "json"):
        print(f"[{fmt}]")
        print(render_report(results, fmt))


if __name__ == "__main__":
    main()
