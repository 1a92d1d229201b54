# -*- coding: utf-8 -*-
# Part of Odoo. See LICENSE file for full copyright and licensing details.

from . import (
    fleet_caf_classifier,
    fleet_caf_router,
    fleet_caf_narrative,
    fleet_caf_generator,
)
