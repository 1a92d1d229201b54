# -*- coding: utf-8 -*-
# Part of Odoo. See LICENSE file for full copyright and licensing details.

"""
Tests for CAF title and description generation.
"""

from odoo.tests import tagged

from .common import DotCafCommon


@tagged('post_install', '-at_install', 'dot_caf')
class TestCafNarrative(DotCafCommon):

    @classmethod
    def setUpClass(cls):
        super().setUpClass()
        cls.inspection = cls.Inspection.create({
            'company_id': cls.company.id,
            'driver_id': cls.driver.id,
            'vehicle_ids': [(6, 0, cls.tractor.ids)],
            'inspection_date': '2026-10-01',
            'report_number': 'TX-123456',
        })
        cls.brake_violation = cls.Violation.create({
            'inspection_id': cls.inspection.id,
            'code': '396.3A1',
            'description': 'Brakes out of adjustment on axle 3 right side, pushrod stroke 2.25 inches',
            'severity': 'OUT_OF_SERVICE',
            'out_of_service': True,
            'out_of_service_date': '2026-10-01',
            'inspector_comments': 'Vehicle placed OOS at scene',
        })
        cls.lamp_violation = cls.Violation.create({
            'inspection_id': cls.inspection.id,
            'code': '393.9',
            'description': 'Inoperable required lamp',
        })
        cls.speed_violation = cls.Violation.create({
            'inspection_id': cls.inspection.id,
            'code': '392.2A(1)',
            'description': 'Speeding 6-10 MPH over the limit',
        })

    # ==========================================================================
    # Title
    # ==========================================================================

    def test_01_single_violation_title_truncated(self):
        title = self.narrative.describe('equipment', self.brake_violation)['title']
        self.assertEqual(
            title,
            "Equipment Maintenance - 396.3A1: "
            "Brakes out of adjustment on axle 3 right side, pus...",
        )

    def test_02_single_violation_short_title_not_truncated(self):
        title = self.narrative.describe('driver', self.speed_violation)['title']
        self.assertEqual(title, "Driver Compliance - 392.2A(1): Speeding 6-10 MPH over the limit")

    def test_03_multiple_violations_title(self):
        title = self.narrative.describe('equipment', self.brake_violation | self.lamp_violation)['title']
        self.assertEqual(title, "Equipment Maintenance - Multiple Violations (2 issues)")

    # ==========================================================================
    # Description
    # ==========================================================================

    def test_04_description_lists_every_violation(self):
        description = self.narrative.describe(
            'equipment', self.brake_violation | self.lamp_violation,
        )['description']
        self.assertIn("Corrective Action Required - Equipment Maintenance", description)
        self.assertIn("Inspection: %s / TX-123456 (2026-10-01)" % self.inspection.name, description)
        self.assertIn("Violations (2):", description)
        self.assertIn("1. 396.3A1: Brakes out of adjustment", description)
        self.assertIn("2. 393.9: Inoperable required lamp", description)
        self.assertIn("Severity: OUT_OF_SERVICE", description)
        self.assertIn("Inspector Comments: Vehicle placed OOS at scene", description)

    def test_05_out_of_service_warning_only_when_applicable(self):
        description = self.narrative.describe('equipment', self.brake_violation)['description']
        self.assertIn("OUT OF SERVICE", description)
        self.assertIn("Out of Service Date: 2026-10-01", description)

        description = self.narrative.describe('equipment', self.lamp_violation)['description']
        self.assertNotIn("OUT OF SERVICE", description)

    def test_06_equipment_section(self):
        description = self.narrative.describe('equipment', self.lamp_violation)['description']
        self.assertIn("Involved Equipment:", description)
        self.assertIn(
            "- Freightliner Cascadia (2019) - VIN: 1FUJGLDR5CLBP8834 - Unit: T-101 - Plate: DOT-0001",
            description,
        )
        self.assertIn("1. Inspect and repair/replace defective equipment", description)

    def test_07_driver_section(self):
        description = self.narrative.describe('driver', self.speed_violation)['description']
        self.assertIn("Driver Involved:\n- John Trucker (Driver)", description)
        self.assertIn("1. Immediate driver coaching/retraining on the specific violation", description)
        self.assertNotIn("Involved Equipment:", description)

    def test_08_company_checklist(self):
        description = self.narrative.describe('company', self.speed_violation)['description']
        self.assertIn("Corrective Action Required - Company Operations", description)
        self.assertIn("1. Review and update relevant company policies/procedures", description)
        self.assertNotIn("Driver Involved:", description)

    def test_09_regulatory_references(self):
        code = self.ViolationCode.create({
            'code': '393.9',
            'section': '49 CFR 393.9(a)',
            'description': 'Lamps operable',
            'responsibility_type': 'vehicle',
        })
        self.lamp_violation.violation_code_id = code
        description = self.narrative.describe(
            'equipment', self.brake_violation | self.lamp_violation,
        )['description']
        self.assertIn("Regulatory References:\n- 49 CFR 396.3A1\n- 49 CFR 393.9(a)", description)

    def test_10_description_closes_with_reminder(self):
        description = self.narrative.describe('driver', self.speed_violation)['description']
        self.assertTrue(description.endswith(
            "Documentation: All corrective actions must be documented with supporting evidence."
        ))

    def test_11_narrative_is_deterministic(self):
        violations = self.brake_violation | self.lamp_violation
        first = self.narrative.describe('equipment', violations)
        second = self.narrative.describe('equipment', violations)
        self.assertEqual(first, second)
