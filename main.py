"""
Main entry point for the Complaint Insight Engine.

Analyzes a single complaint through the LangGraph workflow.

Usage:
    python main.py [complaint.json] [--corpus complaints.json] [--output result.json]
"""
import argparse
import asyncio
import json
import sys
import time
from pathlib import Path
from typing import Any, Dict, List

from pydantic import ValidationError

from config import Config
from components.base import configure_logging
from components.base.exceptions import ComponentError
from components.complaints.models import Complaint
from components.orchestrator import ComprehensiveAnalysis, run_analysis


def load_complaint(file_path: Path) -> Complaint:
    """
    Load a complaint from a JSON file.

    Args:
        file_path: Path to input JSON file

    Returns:
        Validated Complaint
    """
    with open(file_path, "r", encoding="utf-8") as f:
        return Complaint.model_validate(json.load(f))


def load_corpus(file_path: Path) -> List[Dict[str, Any]]:
    """Load existing complaints (a JSON array) for duplicate detection."""
    with open(file_path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"Corpus file {file_path} must contain a JSON array")
    return data


def save_output(analysis: ComprehensiveAnalysis, file_path: Path):
    """
    Save analysis to a JSON file.

    Args:
        analysis: Analysis to save
        file_path: Path to save file
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(analysis.model_dump(mode="json"), f, indent=2)

    print(f"\n💾 Saved output to: {file_path}")


def print_summary(analysis: ComprehensiveAnalysis, processing_time: float):
    classification = analysis.classification
    sentiment = analysis.sentiment_analysis
    similar = analysis.similar_complaints

    print("\n" + "=" * 80)
    print("✅ ANALYSIS COMPLETE")
    print("=" * 80)
    print(f"   Category: {analysis.category} (predicted {classification.category}, "
          f"{classification.confidence}% confidence)")
    print(f"   Priority: {analysis.priority} - {classification.priority_reason}")
    print(f"   Department: {classification.department.name} ({classification.department.code})")
    print(f"   Summary: {classification.summary}")
    print(f"   Sentiment: {sentiment.sentiment} (score {sentiment.score})")
    print(f"   Similar complaints: {similar.total_similar} ({len(similar.duplicates)} duplicates)")
    print(f"   {similar.recommendation}")
    print(f"   Reply tone: {analysis.response_suggestions.tone}")
    for suggestion in analysis.response_suggestions.suggestions:
        print(f"     - {suggestion}")
    print(f"   Overall score: {analysis.ai_score.overall}")
    if analysis.recommendations:
        print(f"   Recommendations: {', '.join(analysis.recommendations)}")
    print(f"   Processing Time: {processing_time:.2f} seconds")
    print("=" * 80)


async def process_complaint(input_file: Path, corpus_file: Path = None, output_file: Path = None):
    """
    Analyze a single complaint through the workflow.

    Args:
        input_file: Path to input complaint JSON
        corpus_file: Optional path to existing complaints JSON array
        output_file: Optional path to save the analysis JSON
    """
    print("=" * 80)
    print("📋 COMPLAINT INSIGHT ENGINE")
    print("=" * 80)

    start_time = time.time()

    print(f"\n📂 Loading complaint from: {input_file}")
    complaint = load_complaint(input_file)
    corpus = load_corpus(corpus_file) if corpus_file else []
    print(f"   Complaint ID: {complaint.id if complaint.id is not None else 'N/A'}")
    print(f"   Corpus size: {len(corpus)}")

    print(f"\n🚀 Starting LangGraph workflow...")
    try:
        analysis = await run_analysis(complaint, corpus)
    except ComponentError as e:
        print(f"\n❌ Workflow execution failed: {e.message}")
        sys.exit(1)

    print_summary(analysis, time.time() - start_time)

    if output_file:
        save_output(analysis, output_file)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Analyze a complaint JSON file")
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        default=Config.INPUT_COMPLAINT_PATH,
        help="Complaint JSON file",
    )
    parser.add_argument("--corpus", type=Path, help="JSON array of existing complaints")
    parser.add_argument("--output", type=Path, help="Where to write the analysis JSON")
    return parser.parse_args(argv)


async def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    configure_logging(Config.LOG_LEVEL)

    if not args.input.exists():
        print(f"❌ Error: Input file not found at {args.input}")
        print("   Create a complaint JSON file in the input/ directory")
        sys.exit(1)

    try:
        await process_complaint(args.input, args.corpus, args.output)
    except (ValidationError, ValueError, json.JSONDecodeError) as e:
        print(f"❌ Error: Invalid input: {e}")
        sys.exit(1)


def cli():
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    cli()
