# -*- coding: utf-8 -*-
# Part of Odoo. See LICENSE file for full copyright and licensing details.

from odoo import api, fields, models


class HrEmployee(models.Model):
    _inherit = 'hr.employee'

    can_approve_caf = fields.Boolean(
        string='Can Approve CAFs',
        tracking=True,
        help="Employee allowed to approve Corrective Action Forms. "
             "Used as fallback assignee when no position or department matches."
    )

    assigned_caf_ids = fields.One2many(
        'fleet.caf',
        'assigned_employee_id',
        string='Assigned CAFs',
    )

    assigned_caf_count = fields.Integer(
        string='Assigned CAFs',
        compute='_compute_assigned_caf_count',
    )

    @api.depends('assigned_caf_ids')
    def _compute_assigned_caf_count(self):
        for employee in self:
            employee.assigned_caf_count = len(employee.assigned_caf_ids)
