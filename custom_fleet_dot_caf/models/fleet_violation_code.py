# -*- coding: utf-8 -*-
# Part of Odoo. See LICENSE file for full copyright and licensing details.

from odoo import api, fields, models


class FleetViolationCode(models.Model):
    """
    Catalogue des codes d'infraction DOT (49 CFR).

    The responsibility type stored here is authoritative: when a violation is
    linked to a catalogue entry, it overrides the violation's own type tag and
    the code prefix heuristics.
    """
    _name = 'fleet.violation.code'
    _description = 'DOT Violation Code'
    _order = 'code'
    _rec_names_search = ['code', 'description']

    code = fields.Char(
        string='Code',
        required=True,
        index=True,
        help="Regulatory code as printed on inspection reports (ex: 392.2A(1))"
    )

    section = fields.Char(
        string='CFR Section',
        help="Regulation reference (ex: 49 CFR 392.2)"
    )

    description = fields.Char(
        string='Description',
        required=True,
    )

    responsibility_type = fields.Selection(
        [
            ('driver', 'Driver'),
            ('vehicle', 'Vehicle'),
            ('other', 'Other'),
        ],
        string='Responsibility Type',
        help="Authoritative responsibility used to classify linked violations"
    )

    default_severity = fields.Selection(
        [
            ('warning', 'Warning'),
            ('out_of_service', 'Out of Service'),
            ('citation', 'Citation'),
        ],
        string='Default Severity',
    )

    active = fields.Boolean(default=True)

    _code_unique = models.Constraint(
        'UNIQUE(code)',
        'A violation code must be unique.',
    )

    @api.depends('code', 'description')
    def _compute_display_name(self):
        for record in self:
            record.display_name = f"{record.code} - {record.description}" if record.description else record.code
