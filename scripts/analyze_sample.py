"""Generate a sample contract, analyze it and print the findings."""

import sys
import os
import logging

logging.basicConfig(
    level=logging.INFO,
    format='%(message)s'
)

sys.path.append(os.getcwd())

from core.manager import LegalDocumentManager


SAMPLE_CONTENT = {
    "title": "Services Agreement",
    "author": "J. Doe",
    "Header": "This Agreement is entered into by the parties on the effective date.",
    "Parties": "ABC Corporation, hereinafter referred to as the Company, and XYZ Ltd.",
    "Terms": (
        "The Client shall pay all fees within thirty days. "
        "The Company may suspend services upon breach of this contract."
    ),
    "Conditions": "Neither party shall be liable for damages caused by force majeure.",
}


def main() -> None:
    manager = LegalDocumentManager()
    case = manager.create_case("Sample Matter", {"client": "XYZ Ltd.", "type": "commercial"})
    document = manager.create_document(case.id, "contract", SAMPLE_CONTENT)
    result = manager.analyze_document(document.id)

    print(f"\n📄 {document.name}")
    print("-" * 50)
    print(f"Summary: {result.summary.text}")
    print(f"Words: {result.summary.word_count} | Sentences: {result.summary.sentence_count}")
    print(f"Readability: {result.readability.score} ({result.readability.difficulty.value})")
    print(f"Sentiment: {result.sentiment.overall.value}")

    print("\n⚖️  Legal terms:")
    for term in result.legal_terms:
        print(f"  {term.term}: {term.occurrences}")

    print("\n🔑 Key points:")
    for point in result.key_points:
        print(f"  [{point.category}] {point.text}")

    print("\n⚠️  Risks:")
    for risk in result.risks:
        print(f"  {risk.severity.value.upper()}: {risk.description}")

    print("\n💡 Recommendations:")
    for rec in result.recommendations:
        print(f"  {rec.priority.value}: {rec.text}")


if __name__ == "__main__":
    main()
