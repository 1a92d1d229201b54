# -*- coding: utf-8 -*-
# Part of Odoo. See LICENSE file for full copyright and licensing details.

import logging
import re

from psycopg2.errors import UniqueViolation

from odoo import _, api, fields, models
from odoo.exceptions import UserError
from odoo.tools import mute_logger

from ..services.fleet_caf_classifier import CATEGORY_SELECTION, PRIORITY_SELECTION

_logger = logging.getLogger(__name__)

CAF_NUMBER_PADDING = 4
DEFAULT_ALLOCATION_ATTEMPTS = 3


class CafNumberAllocationError(UserError):
    """No free CAF number could be reserved after the allowed attempts."""


class FleetCorrectiveActionForm(models.Model):
    """
    Corrective Action Form (CAF).

    Numbering: CAF-<year>-<sequence>, the sequence being the highest number
    already used for the year plus one. Two concurrent runs can compute the
    same number; the UNIQUE(name) constraint rejects the second insert and
    _create_with_allocated_number() retries with a fresh read.

    One CAF covers every violation of one responsibility group of an
    inspection (violation_ids); violation_id is the first one of the group.
    """
    _name = 'fleet.caf'
    _description = 'Corrective Action Form'
    _inherit = ['mail.thread', 'mail.activity.mixin']
    _order = 'due_date, id desc'

    # ========== IDENTIFICATION ==========

    name = fields.Char(
        string='CAF Number',
        required=True,
        copy=False,
        readonly=True,
        index=True,
        default='/',
        help="Sequential number unique per year (ex: CAF-2026-0001)"
    )

    title = fields.Char(
        string='Title',
        required=True,
        tracking=True,
    )

    description = fields.Text(string='Corrective Action')

    # ========== CLASSIFICATION ==========

    category = fields.Selection(
        CATEGORY_SELECTION,
        string='Category',
        required=True,
        tracking=True,
    )

    priority = fields.Selection(
        PRIORITY_SELECTION,
        string='Priority',
        required=True,
        default='medium',
        tracking=True,
    )

    state = fields.Selection(
        [
            ('assigned', 'Assigned'),
            ('in_progress', 'In Progress'),
            ('completed', 'Completed'),
            ('approved', 'Approved'),
            ('closed', 'Closed'),
        ],
        string='Status',
        required=True,
        default='assigned',
        tracking=True,
    )

    # ========== ASSIGNMENT ==========

    assigned_employee_id = fields.Many2one(
        'hr.employee',
        string='Assigned To',
        required=True,
        tracking=True,
    )

    creator_employee_id = fields.Many2one(
        'hr.employee',
        string='Assigned By',
        tracking=True,
    )

    company_id = fields.Many2one(
        'res.company',
        string='Company',
        required=True,
        index=True,
        default=lambda self: self.env.company,
    )

    due_date = fields.Date(
        string='Due Date',
        required=True,
        tracking=True,
    )

    requires_approval = fields.Boolean(
        string='Requires Approval',
        default=True,
    )

    is_overdue = fields.Boolean(
        string='Overdue',
        compute='_compute_is_overdue',
    )

    # ========== VIOLATIONS ==========

    violation_id = fields.Many2one(
        'fleet.inspection.violation',
        string='Primary Violation',
        index=True,
        ondelete='restrict',
    )

    violation_ids = fields.One2many(
        'fleet.inspection.violation',
        'caf_id',
        string='Violations',
    )

    violation_count = fields.Integer(compute='_compute_violation_count')

    inspection_id = fields.Many2one(
        related='violation_id.inspection_id',
        store=True,
        index=True,
        string='Inspection',
    )

    _name_unique = models.Constraint(
        'UNIQUE(name)',
        'The CAF number must be unique.',
    )

    # ========== COMPUTE METHODS ==========

    @api.depends('due_date', 'state')
    def _compute_is_overdue(self):
        today = fields.Date.context_today(self)
        for caf in self:
            caf.is_overdue = bool(
                caf.due_date and caf.due_date < today and caf.state not in ('approved', 'closed')
            )

    @api.depends('violation_ids')
    def _compute_violation_count(self):
        for caf in self:
            caf.violation_count = len(caf.violation_ids)

    # ========== NUMBERING ==========

    @api.model
    def _next_caf_number(self, year=None):
        """Next free CAF number for the year, from the highest existing one."""
        year = year or fields.Date.context_today(self).year
        prefix = f"CAF-{year}-"
        self.flush_model(['name'])
        self.env.cr.execute("""
            SELECT COALESCE(MAX(SUBSTRING(name FROM '[0-9]+$')::int), 0)
            FROM fleet_caf
            WHERE name ~ %s
        """, ('^%s[0-9]+$' % re.escape(prefix),))
        last_number = self.env.cr.fetchone()[0]
        return f"{prefix}{str(last_number + 1).zfill(CAF_NUMBER_PADDING)}"

    @api.model
    def _create_with_allocated_number(self, vals, attempts=DEFAULT_ALLOCATION_ATTEMPTS):
        """Create a CAF under a freshly allocated number.

        Each attempt runs in its own savepoint so a number collision only
        rolls back that insert.

        Raises:
            CafNumberAllocationError: every attempt hit an existing number
        """
        attempts = max(attempts, 1)
        for attempt in range(1, attempts + 1):
            number = self._next_caf_number()
            try:
                with self.env.cr.savepoint(), mute_logger('odoo.sql_db'):
                    caf = self.create(dict(vals, name=number))
                return caf
            except UniqueViolation:
                _logger.warning(
                    "CAF number %s already taken (attempt %d/%d), retrying",
                    number, attempt, attempts,
                )
        raise CafNumberAllocationError(_(
            "Could not allocate a CAF number after %s attempts.", attempts,
        ))

    # ========== CRUD ==========

    @api.model_create_multi
    def create(self, vals_list):
        unnumbered = [vals for vals in vals_list if not vals.get('name') or vals.get('name') == '/']
        if unnumbered:
            prefix, first = self._next_caf_number().rsplit('-', 1)
            for offset, vals in enumerate(unnumbered):
                vals['name'] = f"{prefix}-{str(int(first) + offset).zfill(CAF_NUMBER_PADDING)}"
        cafs = super().create(vals_list)
        for caf in cafs:
            caf.message_post(
                body=_("Corrective Action Form created and assigned to %s", caf.assigned_employee_id.name),
                message_type='notification',
            )
        return cafs

    # ========== ACTIONS ==========

    def _get_action_view(self):
        action = {
            'type': 'ir.actions.act_window',
            'name': _("Corrective Action Forms"),
            'res_model': 'fleet.caf',
            'view_mode': 'list,form',
            'domain': [('id', 'in', self.ids)],
            'context': {'create': False},
        }
        if len(self) == 1:
            action.update({
                'view_mode': 'form',
                'res_id': self.id,
            })
        return action
