# -*- coding: utf-8 -*-
# Part of Odoo. See LICENSE file for full copyright and licensing details.

from markupsafe import Markup

from odoo import _, api, fields, models
from odoo.exceptions import UserError


class FleetRoadsideInspection(models.Model):
    """
    Contrôle routier (Roadside Inspection, RINS).

    Holds the violations written by the inspector and is the entry point of
    the CAF generation: each non-empty responsibility group of unassigned
    violations yields one Corrective Action Form.
    """
    _name = 'fleet.roadside.inspection'
    _description = 'Roadside Inspection'
    _inherit = ['mail.thread', 'mail.activity.mixin']
    _order = 'inspection_date desc, id desc'
    _rec_names_search = ['name', 'report_number']

    # ========== IDENTIFICATION ==========

    name = fields.Char(
        string='Reference',
        required=True,
        copy=False,
        readonly=True,
        index=True,
        default='/',
        help="Internal reference (ex: RINS-0001)"
    )

    report_number = fields.Char(
        string='Report Number',
        tracking=True,
        help="Number printed on the inspection report"
    )

    inspection_date = fields.Date(
        string='Inspection Date',
        required=True,
        default=fields.Date.context_today,
        tracking=True,
    )

    inspection_level = fields.Selection(
        [
            ('1', 'Level I - North American Standard'),
            ('2', 'Level II - Walk-Around'),
            ('3', 'Level III - Driver Only'),
            ('4', 'Level IV - Special'),
            ('5', 'Level V - Vehicle Only'),
            ('6', 'Level VI - Radioactive Materials'),
        ],
        string='CVSA Level',
        tracking=True,
    )

    location = fields.Char(string='Location')

    # ========== ORGANIZATION, DRIVER & EQUIPMENT ==========

    company_id = fields.Many2one(
        'res.company',
        string='Company',
        default=lambda self: self.env.company,
        tracking=True,
        help="Motor carrier inspected"
    )

    driver_id = fields.Many2one(
        'hr.employee',
        string='Driver',
        tracking=True,
    )

    vehicle_ids = fields.Many2many(
        'fleet.vehicle',
        string='Equipment',
        help="Power units and trailers inspected"
    )

    # ========== VIOLATIONS & CAF ==========

    violation_ids = fields.One2many(
        'fleet.inspection.violation',
        'inspection_id',
        string='Violations',
    )

    violation_count = fields.Integer(
        compute='_compute_violation_count',
    )

    out_of_service = fields.Boolean(
        string='Out of Service',
        compute='_compute_out_of_service',
        store=True,
        help="At least one violation resulted in an out-of-service order"
    )

    caf_ids = fields.One2many(
        'fleet.caf',
        'inspection_id',
        string='Corrective Action Forms',
    )

    caf_count = fields.Integer(
        compute='_compute_caf_count',
    )

    notes = fields.Html(string='Notes')

    # ========== COMPUTE METHODS ==========

    @api.depends('violation_ids')
    def _compute_violation_count(self):
        for inspection in self:
            inspection.violation_count = len(inspection.violation_ids)

    @api.depends('violation_ids.out_of_service')
    def _compute_out_of_service(self):
        for inspection in self:
            inspection.out_of_service = any(inspection.violation_ids.mapped('out_of_service'))

    @api.depends('caf_ids')
    def _compute_caf_count(self):
        for inspection in self:
            inspection.caf_count = len(inspection.caf_ids)

    # ========== CRUD ==========

    @api.model_create_multi
    def create(self, vals_list):
        for vals in vals_list:
            if not vals.get('name') or vals.get('name') == '/':
                vals['name'] = self.env['ir.sequence'].next_by_code('fleet.roadside.inspection') or '/'
        return super().create(vals_list)

    # ========== ORGANIZATION & IDENTITY ==========

    def _resolve_organization(self):
        """Company responsible for the inspection.

        The inspected company when set, otherwise the company of the
        inspected driver. Returns an empty recordset when neither is known.
        """
        self.ensure_one()
        if self.company_id:
            return self.company_id
        if self.driver_id and self.driver_id.active:
            return self.driver_id.company_id
        return self.env['res.company']

    def _get_creator_employee(self):
        """Staff recorded as creator of CAFs generated from the UI.

        The current user's employee in the organization, or else a manager,
        supervisor or CAF approver of the organization.
        """
        self.ensure_one()
        company = self._resolve_organization()
        if not company:
            raise UserError(_("Could not determine the company of inspection %s.", self.name))

        Employee = self.env['hr.employee'].sudo()
        base_domain = [('company_id', '=', company.id), ('active', '=', True)]
        creator = Employee.search(base_domain + [('user_id', '=', self.env.uid)], order='id', limit=1)
        if not creator:
            creator = Employee.search(base_domain + [
                '|', '|',
                ('job_title', 'ilike', 'manager'),
                ('job_title', 'ilike', 'supervisor'),
                ('can_approve_caf', '=', True),
            ], order='id', limit=1)
        if not creator:
            raise UserError(_(
                "No employee of %s can be recorded as creator of Corrective Action Forms. "
                "Please add employees to this company first.",
                company.name,
            ))
        return creator

    # ========== ACTIONS ==========

    def action_generate_cafs(self):
        """Generate the Corrective Action Forms of the unassigned violations."""
        self.ensure_one()
        creator = self._get_creator_employee()
        cafs = self.env['fleet.caf.generator'].generate_cafs(self, creator)
        if cafs:
            lines = Markup('').join(
                Markup('<li>%s - %s (%s)</li>') % (caf.name, caf.title, caf.assigned_employee_id.name)
                for caf in cafs
            )
            self.message_post(
                body=Markup('<p>%s</p><ul>%s</ul>') % (
                    _("%s Corrective Action Form(s) generated:", len(cafs)), lines,
                ),
                message_type='notification',
            )
            return cafs._get_action_view()
        return {
            'type': 'ir.actions.client',
            'tag': 'display_notification',
            'params': {
                'title': _("Corrective Action Forms"),
                'message': _("No Corrective Action Form generated. All violations may already be covered."),
                'type': 'info',
                'sticky': False,
            },
        }

    def action_view_cafs(self):
        self.ensure_one()
        return self.caf_ids._get_action_view()
