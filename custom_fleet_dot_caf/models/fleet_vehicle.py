# -*- coding: utf-8 -*-
# Part of Odoo. See LICENSE file for full copyright and licensing details.

from odoo import fields, models


class FleetVehicle(models.Model):
    _inherit = 'fleet.vehicle'

    unit_number = fields.Char(
        string='Unit Number',
        copy=False,
        tracking=True,
        help="Carrier unit number painted on the power unit or trailer"
    )

    def _get_caf_equipment_label(self):
        """One-line description used in corrective action narratives."""
        self.ensure_one()
        parts = [
            " ".join(filter(None, [self.model_id.brand_id.name, self.model_id.name])),
            f"({self.model_year})" if self.model_year else '',
        ]
        label = " ".join(filter(None, parts)) or self.display_name
        details = []
        if self.vin_sn:
            details.append(f"VIN: {self.vin_sn}")
        if self.unit_number:
            details.append(f"Unit: {self.unit_number}")
        if self.license_plate:
            details.append(f"Plate: {self.license_plate}")
        return " - ".join([label] + details)
