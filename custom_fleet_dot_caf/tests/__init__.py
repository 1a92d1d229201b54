# -*- coding: utf-8 -*-
# Part of Odoo. See LICENSE file for full copyright and licensing details.

from . import (
    test_caf_classifier,
    test_caf_router,
    test_caf_narrative,
    test_caf_generation,
    test_caf_numbering,
)
