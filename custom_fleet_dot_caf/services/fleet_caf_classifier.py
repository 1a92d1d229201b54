# -*- coding: utf-8 -*-
# Part of Odoo. See LICENSE file for full copyright and licensing details.
"""Violation classification and CAF priority.

Responsibility of a violation is resolved from three sources, first match wins:

1. the responsibility type of the linked violation code (catalogue),
2. the explicit type tag recorded on the violation,
3. the regulatory code prefix (49 CFR part 390 to 396).

Unrecognized input always ends up in the Company category.

Usage:
    classifier = self.env["fleet.caf.classifier"]
    category = classifier.classify(violation)
    priority = classifier.compute_priority(out_of_service=True, code="396.3")
"""
import re

from odoo import api, models

CATEGORY_SELECTION = [
    ('driver', 'Driver'),
    ('equipment', 'Equipment'),
    ('company', 'Company'),
]

PRIORITY_SELECTION = [
    ('medium', 'Medium'),
    ('high', 'High'),
    ('critical', 'Critical'),
]

# Bucket order of a generation run
CATEGORY_ORDER = ('driver', 'equipment', 'company')
DEFAULT_CATEGORY = 'company'

LOOKUP_TYPE_CATEGORY = {
    'driver': 'driver',
    'vehicle': 'equipment',
    'other': 'company',
}

VIOLATION_TYPE_CATEGORY = {
    'driver_qualification': 'driver',
    'driver_performance': 'driver',
    'driver': 'driver',
    'equipment': 'equipment',
    'vehicle': 'equipment',
    'company': 'company',
}

CODE_PREFIX_CATEGORY = (
    ('391', 'driver'),
    ('392', 'driver'),
    ('393', 'equipment'),
    ('396', 'equipment'),
    ('390', 'company'),
)

HIGH_PRIORITY_CODE_FRAGMENTS = ('392.2', '392.3', '392.4', '392.5', '393.5', '393.9')

PRIORITY_RANK = {
    'medium': 0,
    'high': 1,
    'critical': 2,
}

_CFR_PREFIX_RE = re.compile(r'^\s*49\s*CFR\s*', re.IGNORECASE)


class FleetCafClassifier(models.AbstractModel):
    """Pure decision rules of the CAF engine (no database writes)."""

    _name = "fleet.caf.classifier"
    _description = "Classification des infractions DOT"

    # -------------------------------------------------------------------------
    # NORMALIZATION
    # -------------------------------------------------------------------------
    @api.model
    def normalize_code(self, code):
        """Strip whitespace and a leading '49 CFR' citation from a code."""
        if not code:
            return ''
        return _CFR_PREFIX_RE.sub('', str(code)).strip()

    @api.model
    def _normalize_tag(self, value):
        if not value:
            return ''
        return re.sub(r'[\s\-]+', '_', str(value).strip()).lower()

    # -------------------------------------------------------------------------
    # CLASSIFICATION
    # -------------------------------------------------------------------------
    @api.model
    def classify_values(self, lookup_type=None, violation_type=None, code=None):
        """Resolve a responsibility category from raw values.

        Args:
            lookup_type: responsibility type of the violation code catalogue entry
            violation_type: explicit type tag of the violation
            code: regulatory code (e.g. '392.2A(1)')

        Returns:
            str: 'driver', 'equipment' or 'company'
        """
        category = LOOKUP_TYPE_CATEGORY.get(self._normalize_tag(lookup_type))
        if category:
            return category

        category = VIOLATION_TYPE_CATEGORY.get(self._normalize_tag(violation_type))
        if category:
            return category

        normalized = self.normalize_code(code)
        for prefix, category in CODE_PREFIX_CATEGORY:
            if normalized.startswith(prefix):
                return category
        return DEFAULT_CATEGORY

    @api.model
    def classify(self, violation):
        """Classify a fleet.inspection.violation record."""
        return self.classify_values(
            lookup_type=violation.violation_code_id.responsibility_type,
            violation_type=violation.violation_type,
            code=violation.code,
        )

    @api.model
    def group_by_category(self, violations):
        """Partition violations into category buckets.

        Returns:
            dict: category -> recordset, non-empty buckets only, in
            CATEGORY_ORDER. Input order is kept inside each bucket.
        """
        buckets = {category: violations.browse() for category in CATEGORY_ORDER}
        for violation in violations:
            buckets[self.classify(violation)] |= violation
        return {category: group for category, group in buckets.items() if group}

    # -------------------------------------------------------------------------
    # PRIORITY
    # -------------------------------------------------------------------------
    @api.model
    def compute_priority(self, out_of_service, code):
        """Priority of a single violation.

        Out-of-service always wins; known high-severity code fragments give
        'high'; everything else is 'medium'.
        """
        if out_of_service:
            return 'critical'
        normalized = self.normalize_code(code)
        if any(fragment in normalized for fragment in HIGH_PRIORITY_CODE_FRAGMENTS):
            return 'high'
        return 'medium'

    @api.model
    def compute_group_priority(self, violations):
        """Highest priority of a group, stops at the first critical member."""
        priority = 'medium'
        for violation in violations:
            current = self.compute_priority(violation.out_of_service, violation.code)
            if current == 'critical':
                return current
            if PRIORITY_RANK[current] > PRIORITY_RANK[priority]:
                priority = current
        return priority
