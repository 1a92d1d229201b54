# -*- coding: utf-8 -*-
# Part of Odoo. See LICENSE file for full copyright and licensing details.

from odoo import api, fields, models

from ..services.fleet_caf_classifier import CATEGORY_SELECTION

MATCH_FIELDS = {
    'position': ('job_title',),
    'department': ('department_id.name',),
    'both': ('job_title', 'department_id.name'),
}


class FleetCafRoutingRule(models.Model):
    """
    Keyword rule used to route a CAF category to an employee.

    Rules of a company replace the shared rules (no company) for the same
    category; when no rule exists at all for a category, the router uses its
    built-in keyword table.
    """
    _name = 'fleet.caf.routing.rule'
    _description = 'CAF Routing Rule'
    _order = 'category, sequence, id'

    sequence = fields.Integer(default=10)

    category = fields.Selection(
        CATEGORY_SELECTION,
        string='Category',
        required=True,
    )

    keyword = fields.Char(
        string='Keyword',
        required=True,
        help="Case-insensitive text searched in the employee job position and/or department"
    )

    match_on = fields.Selection(
        [
            ('position', 'Job Position'),
            ('department', 'Department'),
            ('both', 'Job Position or Department'),
        ],
        string='Match On',
        required=True,
        default='both',
    )

    company_id = fields.Many2one(
        'res.company',
        string='Company',
        help="Leave empty to apply the rule to every company"
    )

    active = fields.Boolean(default=True)

    @api.model
    def _get_routing_terms(self, company, category):
        """Search terms (field path, keyword) for a company and category.

        Returns an empty list when no rule is configured.
        """
        rules = self.sudo().search([
            ('category', '=', category),
            ('company_id', 'in', [company.id, False]),
        ])
        company_rules = rules.filtered(lambda r: r.company_id == company)
        if company_rules:
            rules = company_rules
        terms = []
        for rule in rules:
            keyword = rule.keyword.strip()
            if not keyword:
                continue
            terms.extend((field, keyword) for field in MATCH_FIELDS[rule.match_on])
        return terms
