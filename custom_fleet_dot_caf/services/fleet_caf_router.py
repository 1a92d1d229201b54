# -*- coding: utf-8 -*-
# Part of Odoo. See LICENSE file for full copyright and licensing details.
"""Staff routing for Corrective Action Forms.

Search order, always among the active employees of the company:

1. position/department keyword match for the category,
2. any employee allowed to approve CAFs,
3. any employee.

Keyword matching is a heuristic: a department that merely contains a
keyword is accepted.
"""
import logging

from odoo import api, models

_logger = logging.getLogger(__name__)

# Built-in keyword table, used when no fleet.caf.routing.rule exists for a
# category. Values are (field path, keyword).
DEFAULT_ROUTING_TERMS = {
    'driver': [
        ('job_title', 'safety'),
        ('job_title', 'operations'),
        ('department_id.name', 'safety'),
        ('department_id.name', 'operations'),
    ],
    'equipment': [
        ('job_title', 'maintenance'),
        ('job_title', 'fleet'),
        ('department_id.name', 'maintenance'),
        ('department_id.name', 'fleet'),
    ],
    'company': [
        ('job_title', 'compliance'),
        ('job_title', 'manager'),
        ('job_title', 'director'),
        ('department_id.name', 'compliance'),
    ],
}


class FleetCafRouter(models.AbstractModel):
    _name = "fleet.caf.router"
    _description = "Affectation des CAF au personnel"

    @api.model
    def _get_staff_domain(self, company):
        return [
            ('company_id', '=', company.id),
            ('active', '=', True),
        ]

    @api.model
    def _get_routing_terms(self, company, category):
        terms = self.env['fleet.caf.routing.rule']._get_routing_terms(company, category)
        return terms or DEFAULT_ROUTING_TERMS.get(category, [])

    @api.model
    def _build_keyword_domain(self, terms):
        if not terms:
            return []
        return ['|'] * (len(terms) - 1) + [(field, 'ilike', keyword) for field, keyword in terms]

    @api.model
    def route(self, company, category):
        """Employee responsible for a CAF category in a company.

        Args:
            company: res.company recordset
            category: 'driver', 'equipment' or 'company'

        Returns:
            hr.employee recordset, empty when the company has no active employee
        """
        Employee = self.env['hr.employee'].sudo()
        if not company:
            return Employee.browse()

        base_domain = self._get_staff_domain(company)
        keyword_domain = self._build_keyword_domain(self._get_routing_terms(company, category))
        if keyword_domain:
            employee = Employee.search(base_domain + keyword_domain, order='id', limit=1)
            if employee:
                _logger.debug("CAF %s routed to %s (keyword match)", category, employee.name)
                return employee

        employee = Employee.search(base_domain + [('can_approve_caf', '=', True)], order='id', limit=1)
        if employee:
            _logger.debug("CAF %s routed to %s (CAF approver)", category, employee.name)
            return employee

        employee = Employee.search(base_domain, order='id', limit=1)
        if employee:
            _logger.debug("CAF %s routed to %s (any active employee)", category, employee.name)
        return employee
