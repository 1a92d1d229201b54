# -*- coding: utf-8 -*-
# Part of Odoo. See LICENSE file for full copyright and licensing details.

from odoo.tests import TransactionCase


class DotCafCommon(TransactionCase):
    """Motor carrier with a safety department and a maintenance shop."""

    @classmethod
    def setUpClass(cls):
        super().setUpClass()
        cls.Inspection = cls.env['fleet.roadside.inspection']
        cls.Violation = cls.env['fleet.inspection.violation']
        cls.Caf = cls.env['fleet.caf']
        cls.ViolationCode = cls.env['fleet.violation.code']
        cls.classifier = cls.env['fleet.caf.classifier']
        cls.router = cls.env['fleet.caf.router']
        cls.narrative = cls.env['fleet.caf.narrative']
        cls.generator = cls.env['fleet.caf.generator']

        cls.company = cls.env['res.company'].create({
            'name': 'Test Motor Carrier',
        })

        # Staff
        cls.safety_department = cls.env['hr.department'].create({
            'name': 'Safety',
            'company_id': cls.company.id,
        })
        cls.maintenance_department = cls.env['hr.department'].create({
            'name': 'Maintenance',
            'company_id': cls.company.id,
        })
        cls.safety_manager = cls.env['hr.employee'].create({
            'name': 'Safety Manager',
            'job_title': 'Safety Manager',
            'department_id': cls.safety_department.id,
            'company_id': cls.company.id,
        })
        cls.fleet_tech = cls.env['hr.employee'].create({
            'name': 'Fleet Tech',
            'job_title': 'Fleet Tech',
            'department_id': cls.maintenance_department.id,
            'company_id': cls.company.id,
        })
        cls.driver = cls.env['hr.employee'].create({
            'name': 'John Trucker',
            'job_title': 'Driver',
            'company_id': cls.company.id,
        })

        # Equipment
        cls.brand = cls.env['fleet.vehicle.model.brand'].create({
            'name': 'Freightliner',
        })
        cls.vehicle_model = cls.env['fleet.vehicle.model'].create({
            'name': 'Cascadia',
            'brand_id': cls.brand.id,
        })
        cls.tractor = cls.env['fleet.vehicle'].create({
            'model_id': cls.vehicle_model.id,
            'license_plate': 'DOT-0001',
            'vin_sn': '1FUJGLDR5CLBP8834',
            'model_year': '2019',
            'unit_number': 'T-101',
            'company_id': cls.company.id,
        })

    def _create_inspection(self, violations=(), **kwargs):
        """Inspection of the test carrier with the given violation values."""
        vals = {
            'company_id': self.company.id,
            'driver_id': self.driver.id,
            'vehicle_ids': [(6, 0, self.tractor.ids)],
            'inspection_date': '2026-10-01',
            'report_number': 'TX-123456',
            'violation_ids': [(0, 0, dict(v)) for v in violations],
        }
        vals.update(kwargs)
        return self.Inspection.create(vals)

    def _create_staffless_company(self, name='Empty Carrier'):
        return self.env['res.company'].create({'name': name})
