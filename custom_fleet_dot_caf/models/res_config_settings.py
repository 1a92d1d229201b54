# -*- coding: utf-8 -*-
# Part of Odoo. See LICENSE file for full copyright and licensing details.

from odoo import _, api, fields, models
from odoo.exceptions import ValidationError


class ResConfigSettings(models.TransientModel):
    """CAF generation settings.

    All config_parameter keys are namespaced with 'custom_fleet_dot_caf.'.
    """
    _inherit = 'res.config.settings'

    custom_fleet_dot_caf_critical_due_days = fields.Integer(
        string="Critical CAF due days",
        help="Days allowed to complete a CAF with an out-of-service order.",
        config_parameter='custom_fleet_dot_caf.critical_due_days',
        default=15,
    )

    custom_fleet_dot_caf_standard_due_days = fields.Integer(
        string="Standard CAF due days",
        help="Days allowed to complete any other CAF.",
        config_parameter='custom_fleet_dot_caf.standard_due_days',
        default=30,
    )

    custom_fleet_dot_caf_number_allocation_attempts = fields.Integer(
        string="CAF number allocation attempts",
        help="Retries when two generations compete for the same CAF number.",
        config_parameter='custom_fleet_dot_caf.number_allocation_attempts',
        default=3,
    )

    custom_fleet_dot_caf_requires_approval = fields.Boolean(
        string="Generated CAFs require approval",
        config_parameter='custom_fleet_dot_caf.requires_approval',
        default=True,
    )

    @api.constrains(
        'custom_fleet_dot_caf_critical_due_days',
        'custom_fleet_dot_caf_standard_due_days',
        'custom_fleet_dot_caf_number_allocation_attempts',
    )
    def _check_positive_caf_settings(self):
        for settings in self:
            if min(
                settings.custom_fleet_dot_caf_critical_due_days,
                settings.custom_fleet_dot_caf_standard_due_days,
                settings.custom_fleet_dot_caf_number_allocation_attempts,
            ) <= 0:
                raise ValidationError(_("CAF due days and allocation attempts must be positive."))
