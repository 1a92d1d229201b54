# -*- coding: utf-8 -*-
# Part of Odoo. See LICENSE file for full copyright and licensing details.

from odoo import _, api, fields, models
from odoo.exceptions import ValidationError

from ..services.fleet_caf_classifier import CATEGORY_SELECTION


class FleetInspectionViolation(models.Model):
    """
    Infraction relevée lors d'un contrôle routier.

    A violation belongs to exactly one inspection. The CAF engine never
    modifies it except for the caf_id link, set when a Corrective Action Form
    covers the violation. Violations without a link are the input of the next
    generation run.
    """
    _name = 'fleet.inspection.violation'
    _description = 'Roadside Inspection Violation'
    _order = 'inspection_id, sequence, id'
    _rec_name = 'code'

    inspection_id = fields.Many2one(
        'fleet.roadside.inspection',
        string='Inspection',
        required=True,
        index=True,
        ondelete='cascade',
    )

    sequence = fields.Integer(default=10)

    code = fields.Char(
        string='Violation Code',
        required=True,
        help="Regulatory code as written by the inspector (ex: 396.3A1)"
    )

    description = fields.Text(
        string='Description',
        required=True,
    )

    severity = fields.Char(
        string='Severity',
        help="Severity label reported by the inspector"
    )

    out_of_service = fields.Boolean(
        string='Out of Service',
        help="The violation resulted in an out-of-service order"
    )

    out_of_service_date = fields.Date(string='Out of Service Date')

    inspector_comments = fields.Text(string='Inspector Comments')

    violation_type = fields.Selection(
        [
            ('driver_qualification', 'Driver Qualification'),
            ('driver_performance', 'Driver Performance'),
            ('equipment', 'Equipment'),
            ('company', 'Company'),
        ],
        string='Violation Type',
        help="Explicit responsibility tag, used when no catalogue code is linked"
    )

    violation_code_id = fields.Many2one(
        'fleet.violation.code',
        string='Catalogue Code',
        ondelete='set null',
    )

    company_id = fields.Many2one(
        related='inspection_id.company_id',
        store=True,
        index=True,
    )

    responsibility_category = fields.Selection(
        CATEGORY_SELECTION,
        string='Responsibility',
        compute='_compute_responsibility_category',
        store=True,
    )

    caf_id = fields.Many2one(
        'fleet.caf',
        string='Corrective Action Form',
        readonly=True,
        copy=False,
        index=True,
        ondelete='set null',
        help="CAF covering this violation"
    )

    @api.depends('code', 'violation_type', 'violation_code_id.responsibility_type')
    def _compute_responsibility_category(self):
        classifier = self.env['fleet.caf.classifier']
        for violation in self:
            violation.responsibility_category = classifier.classify(violation)

    @api.constrains('out_of_service', 'out_of_service_date')
    def _check_out_of_service_date(self):
        for violation in self:
            if violation.out_of_service_date and not violation.out_of_service:
                raise ValidationError(_(
                    "Violation %s has an out-of-service date but no out-of-service order.",
                    violation.code,
                ))

    def action_generate_caf(self, assigned_employee=None):
        """Create a one-off CAF for this violation."""
        self.ensure_one()
        creator = self.inspection_id._get_creator_employee()
        caf = self.env['fleet.caf.generator'].generate_caf_from_violation(
            self, creator, assigned_employee=assigned_employee,
        )
        return caf._get_action_view()
