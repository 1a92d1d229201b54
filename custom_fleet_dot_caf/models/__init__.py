# -*- coding: utf-8 -*-
# Part of Odoo. See LICENSE file for full copyright and licensing details.

from . import (
    fleet_violation_code,
    fleet_roadside_inspection,
    fleet_inspection_violation,
    fleet_caf,
    fleet_caf_routing_rule,
    fleet_vehicle,
    hr_employee,
    res_config_settings,
)
