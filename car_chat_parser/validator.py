"""
Data Validator

Optional checks on extracted listing details. The parser itself never
validates; callers that need numbers or sanity checks use this.
"""

from typing import List, Tuple
from datetime import datetime
import re
from .models import ListingDetails
from .listing_regexes import parse_price_to_int, parse_mileage_to_int, parse_year


class ListingValidator:
    """Validate listing details for data quality."""

    MIN_YEAR = 1900
    MAX_MILEAGE = 1000000

    @staticmethod
    def validate_details(details: ListingDetails, strict: bool = False) -> Tuple[bool, List[str]]:
        """
        Validate listing details.

        Args:
            details: ListingDetails to validate
            strict: If True, missing make/model/price are errors instead of warnings

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []
        warnings = []

        # ===== REQUIRED-ISH FIELDS =====

        for name in ('make', 'model', 'price'):
            if getattr(details, name) is None:
                if strict:
                    errors.append(f"Missing {name}")
                else:
                    warnings.append(f"Missing {name}")

        # ===== FORMAT CHECKS =====

        if details.year is not None:
            year = parse_year(details.year)
            current_year = datetime.now().year
            if year is None:
                errors.append(f"Unrecognised year: {details.year}")
            elif year < ListingValidator.MIN_YEAR or year > current_year + 1:
                errors.append(f"Year out of range: {year}")

        if details.price is not None and parse_price_to_int(details.price) is None:
            errors.append(f"Price has no amount: {details.price}")

        if details.monthly_from is not None and parse_price_to_int(details.monthly_from) is None:
            warnings.append(f"Monthly price has no amount: {details.monthly_from}")

        if details.mileage is not None:
            mileage = parse_mileage_to_int(details.mileage)
            if mileage is None:
                errors.append(f"Mileage has no number: {details.mileage}")
            elif mileage > ListingValidator.MAX_MILEAGE:
                errors.append(f"Extremely high mileage: {mileage:,}")

        if details.url is not None and not details.url.startswith(('http://', 'https://')):
            errors.append(f"Invalid listing URL: {details.url}")

        # ===== FINAL DECISION =====

        is_valid = len(errors) == 0
        all_issues = errors + [f"WARNING: {w}" for w in warnings]

        return is_valid, all_issues


class ValidationReport:
    """Generate validation report for a batch of listings."""

    def __init__(self):
        self.total = 0
        self.valid = 0
        self.invalid = 0
        self.issues = {}

    def add_result(self, details: ListingDetails, is_valid: bool, errors: List[str]):
        """Add validation result."""
        self.total += 1
        if is_valid:
            self.valid += 1
        else:
            self.invalid += 1

        # Track issue frequency
        for error in errors:
            # Clean issue (remove specific values)
            clean_error = re.sub(r':\s.*$', '', error)

            if clean_error not in self.issues:
                self.issues[clean_error] = 0
            self.issues[clean_error] += 1

    def print_report(self, file=None):
        """Print validation report."""
        def out(line=""):
            print(line, file=file)

        out("\n" + "=" * 80)
        out("LISTING VALIDATION REPORT")
        out("=" * 80)
        out(f"Total listings: {self.total}")
        out(f"Valid: {self.valid} ({self.valid/self.total*100:.1f}%)" if self.total > 0 else "Valid: 0")
        out(f"Invalid: {self.invalid} ({self.invalid/self.total*100:.1f}%)" if self.total > 0 else "Invalid: 0")

        if self.issues:
            out("\nTop issues found:")
            sorted_issues = sorted(self.issues.items(), key=lambda x: x[1], reverse=True)
            for issue, count in sorted_issues[:10]:
                out(f"  - {issue}: {count} occurrences")

        out("=" * 80 + "\n")
