"""
Utility functions for JSON and CSV output.
"""

import json
import csv
from typing import List, Optional
from datetime import datetime
from pathlib import Path
from .models import NormalizedResponse

DETAIL_FIELDS = [
    'make',
    'model',
    'year',
    'price',
    'location',
    'description',
    'monthly_from',
    'mileage',
    'url',
]


def responses_to_dict(responses: List[NormalizedResponse], names: Optional[List[str]] = None) -> dict:
    """
    Wrap parsed responses with output metadata.

    Args:
        responses: Parsed responses
        names: Optional input name for each response (e.g. file path)
    """
    items = []
    for i, response in enumerate(responses):
        item = response.to_dict()
        if names:
            item["input"] = names[i]
        items.append(item)

    return {
        "metadata": {
            "timestamp": datetime.now().isoformat(),
            "total_responses": len(responses),
            "with_details": sum(1 for r in responses if r.details),
            "source": "car-chat-parser"
        },
        "responses": items
    }


def save_to_json(responses: List[NormalizedResponse], output_path: str = "responses.json",
                 pretty: bool = True, names: Optional[List[str]] = None) -> None:
    """
    Save parsed responses to a JSON file.

    Args:
        responses: List of NormalizedResponse objects to save
        output_path: Path to output JSON file (default: "responses.json")
        pretty: Whether to pretty-print the JSON (default: True)
        names: Optional input name for each response
    """
    data = responses_to_dict(responses, names)

    with open(output_path, 'w', encoding='utf-8') as f:
        if pretty:
            json.dump(data, f, indent=2, ensure_ascii=False)
        else:
            json.dump(data, f, ensure_ascii=False)


def save_to_csv(responses: List[NormalizedResponse], output_path: str = "responses.csv",
                names: Optional[List[str]] = None) -> None:
    """
    Save parsed responses to a CSV file, one row per response.

    Args:
        responses: List of NormalizedResponse objects to save
        output_path: Path to output CSV file (default: "responses.csv")
        names: Optional input name for each response
    """
    with open(output_path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.DictWriter(f, fieldnames=_get_csv_fieldnames())
        writer.writeheader()

        for i, response in enumerate(responses):
            row = _response_to_csv_row(response)
            row['input'] = names[i] if names else ''
            writer.writerow(row)


def _get_csv_fieldnames() -> List[str]:
    """Get CSV column names."""
    return ['input'] + DETAIL_FIELDS + [
        'source_names',  # Will be joined with semicolon
        'source_urls',   # Will be joined with semicolon
    ]


def _response_to_csv_row(response: NormalizedResponse) -> dict:
    """Convert NormalizedResponse to CSV row dictionary."""
    row = {}
    for name in DETAIL_FIELDS:
        value = getattr(response.details, name) if response.details else None
        row[name] = (value or '').replace('\n', ' ').replace('\r', ' ')
    row['source_names'] = '; '.join(source.name for source in response.sources)
    row['source_urls'] = '; '.join(source.url for source in response.sources)
    return row


def save_to_file(responses: List[NormalizedResponse], output_path: str, format: Optional[str] = None,
                 names: Optional[List[str]] = None) -> None:
    """
    Save parsed responses to a file, auto-detecting format from extension or using specified format.

    Args:
        responses: List of NormalizedResponse objects to save
        output_path: Path to output file
        format: Optional format override ('json' or 'csv'). If None, detected from file extension.
        names: Optional input name for each response
    """
    if format is None or format == 'auto':
        # Auto-detect from file extension
        ext = Path(output_path).suffix.lower()
        if ext == '.csv':
            format = 'csv'
        else:
            # Default to JSON
            format = 'json'

    if format.lower() == 'csv':
        save_to_csv(responses, output_path, names=names)
    else:
        save_to_json(responses, output_path, pretty=True, names=names)
