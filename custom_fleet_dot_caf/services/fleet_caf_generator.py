# -*- coding: utf-8 -*-
# Part of Odoo. See LICENSE file for full copyright and licensing details.
"""CAF generation from roadside inspection violations.

AbstractModel service orchestrating the classifier, router and narrative
services:

- one CAF per non-empty responsibility group of unassigned violations,
- due date J+15 for critical CAFs, J+30 otherwise (configurable),
- a group that cannot be assigned or numbered is skipped with a warning,
  the other groups are still created.

Usage:
    generator = self.env["fleet.caf.generator"]
    cafs = generator.generate_cafs(inspection, creator_employee)
    caf = generator.generate_caf_from_violation(violation, creator_employee)
"""
import logging

from dateutil.relativedelta import relativedelta

from odoo import Command, _, api, fields, models
from odoo.exceptions import UserError

from ..models.fleet_caf import DEFAULT_ALLOCATION_ATTEMPTS, CafNumberAllocationError

_logger = logging.getLogger(__name__)

DEFAULT_CRITICAL_DUE_DAYS = 15
DEFAULT_STANDARD_DUE_DAYS = 30


class FleetCafGenerator(models.AbstractModel):
    _name = "fleet.caf.generator"
    _description = "Génération des CAF"

    # -------------------------------------------------------------------------
    # CONFIGURATION
    # -------------------------------------------------------------------------
    @api.model
    def _get_caf_config(self):
        """CAF generation settings.

        Returns:
            dict: critical_due_days, standard_due_days,
            number_allocation_attempts, requires_approval
        """
        ICP = self.env['ir.config_parameter'].sudo()

        def positive_int(key, default):
            try:
                value = int(ICP.get_param(f'custom_fleet_dot_caf.{key}', default))
            except (TypeError, ValueError):
                _logger.warning("Invalid custom_fleet_dot_caf.%s value, using %s", key, default)
                return default
            return value if value > 0 else default

        return {
            'critical_due_days': positive_int('critical_due_days', DEFAULT_CRITICAL_DUE_DAYS),
            'standard_due_days': positive_int('standard_due_days', DEFAULT_STANDARD_DUE_DAYS),
            'number_allocation_attempts': positive_int(
                'number_allocation_attempts', DEFAULT_ALLOCATION_ATTEMPTS,
            ),
            'requires_approval': ICP.get_param('custom_fleet_dot_caf.requires_approval', 'False') == 'True',
        }

    @api.model
    def compute_due_date(self, priority, config=None):
        config = config or self._get_caf_config()
        days = config['critical_due_days'] if priority == 'critical' else config['standard_due_days']
        return fields.Date.context_today(self) + relativedelta(days=days)

    # -------------------------------------------------------------------------
    # HELPERS
    # -------------------------------------------------------------------------
    @api.model
    def _get_unassigned_violations(self, inspection):
        return self.env['fleet.inspection.violation'].search([
            ('inspection_id', '=', inspection.id),
            ('caf_id', '=', False),
        ], order='sequence, id')

    @api.model
    def _prepare_caf_values(self, company, category, violations, creator, assignee, config):
        priority = self.env['fleet.caf.classifier'].compute_group_priority(violations)
        narrative = self.env['fleet.caf.narrative'].describe(category, violations)
        return {
            'title': narrative['title'],
            'description': narrative['description'],
            'category': category,
            'priority': priority,
            'assigned_employee_id': assignee.id,
            'creator_employee_id': creator.id if creator else False,
            'company_id': company.id,
            'due_date': self.compute_due_date(priority, config),
            'requires_approval': config['requires_approval'],
            'violation_id': violations[:1].id,
            'violation_ids': [Command.set(violations.ids)],
        }

    @api.model
    def _create_group_caf(self, inspection, company, category, violations, creator, config):
        """CAF of one responsibility group, or an empty recordset if skipped."""
        Caf = self.env['fleet.caf']
        assignee = self.env['fleet.caf.router'].route(company, category)
        if not assignee:
            _logger.warning(
                "No employee found in %s for %s CAF of inspection %s, %d violation(s) left unassigned",
                company.name, category, inspection.name, len(violations),
            )
            return Caf

        vals = self._prepare_caf_values(company, category, violations, creator, assignee, config)
        try:
            return Caf._create_with_allocated_number(
                vals, attempts=config['number_allocation_attempts'],
            )
        except CafNumberAllocationError as e:
            _logger.warning("Skipping %s CAF of inspection %s: %s", category, inspection.name, e)
            return Caf

    # -------------------------------------------------------------------------
    # ENTRY POINTS
    # -------------------------------------------------------------------------
    @api.model
    def generate_cafs(self, inspection, creator):
        """Generate the CAFs of an inspection's unassigned violations.

        Args:
            inspection: fleet.roadside.inspection record
            creator: hr.employee recorded as assigner

        Returns:
            fleet.caf recordset (0 to 3 records)

        Raises:
            UserError: the inspection's company cannot be determined
        """
        inspection.ensure_one()
        Caf = self.env['fleet.caf']
        violations = self._get_unassigned_violations(inspection)
        if not violations:
            _logger.info("Inspection %s: no unassigned violation, no CAF generated", inspection.name)
            return Caf

        company = inspection._resolve_organization()
        if not company:
            raise UserError(_(
                "Could not determine the company of inspection %s, Corrective Action Forms cannot be assigned.",
                inspection.name,
            ))

        config = self._get_caf_config()
        groups = self.env['fleet.caf.classifier'].group_by_category(violations)
        cafs = Caf
        for category, group in groups.items():
            cafs |= self._create_group_caf(inspection, company, category, group, creator, config)

        _logger.info(
            "Inspection %s: %d CAF(s) generated for %d group(s) of violations",
            inspection.name, len(cafs), len(groups),
        )
        return cafs

    @api.model
    def generate_caf_from_violation(self, violation, creator, assigned_employee=None):
        """Create a one-off CAF for a single violation.

        Args:
            violation: fleet.inspection.violation record
            creator: hr.employee recorded as assigner
            assigned_employee: optional hr.employee bypassing the routing

        Raises:
            UserError: violation already covered, company or assignee not found,
                or no CAF number could be allocated
        """
        violation.ensure_one()
        if violation.caf_id:
            raise UserError(_(
                "Violation %(code)s is already covered by %(caf)s.",
                code=violation.code, caf=violation.caf_id.name,
            ))

        company = violation.inspection_id._resolve_organization()
        if not company:
            raise UserError(_("Could not determine the company of violation %s.", violation.code))

        category = self.env['fleet.caf.classifier'].classify(violation)
        assignee = assigned_employee or self.env['fleet.caf.router'].route(company, category)
        if not assignee:
            raise UserError(_("Could not find an employee to assign the Corrective Action Form to."))

        config = self._get_caf_config()
        vals = self._prepare_caf_values(company, category, violation, creator, assignee, config)
        return self.env['fleet.caf']._create_with_allocated_number(
            vals, attempts=config['number_allocation_attempts'],
        )
