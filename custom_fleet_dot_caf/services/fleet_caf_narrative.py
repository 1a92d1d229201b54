# -*- coding: utf-8 -*-
# Part of Odoo. See LICENSE file for full copyright and licensing details.
"""Title and corrective-action text of a CAF.

The output only depends on the violations given and their order: dates are
rendered in ISO format and no locale formatting is used.
"""
from odoo import _, api, fields, models

TITLE_SUMMARY_LENGTH = 50


class FleetCafNarrative(models.AbstractModel):
    _name = "fleet.caf.narrative"
    _description = "Rédaction des CAF"

    @api.model
    def _get_category_label(self, category):
        return {
            'driver': _("Driver Compliance"),
            'equipment': _("Equipment Maintenance"),
            'company': _("Company Operations"),
        }.get(category, _("Safety"))

    @api.model
    def _get_required_actions(self, category):
        if category == 'driver':
            return [
                _("Immediate driver coaching/retraining on the specific violation"),
                _("Document training provided and driver acknowledgment"),
                _("Implement monitoring plan for similar violations"),
                _("Consider progressive discipline if repeat violation"),
            ]
        if category == 'equipment':
            return [
                _("Inspect and repair/replace defective equipment"),
                _("Document repairs with receipts and inspection records"),
                _("Return equipment to service only after verification"),
                _("Review maintenance schedule to prevent recurrence"),
            ]
        return [
            _("Review and update relevant company policies/procedures"),
            _("Ensure all affected staff are trained on corrections"),
            _("Implement systemic controls to prevent recurrence"),
            _("Document policy changes and training completion"),
        ]

    # -------------------------------------------------------------------------
    # TITLE
    # -------------------------------------------------------------------------
    @api.model
    def _build_title(self, category, violations):
        label = self._get_category_label(category)
        if len(violations) > 1:
            return _("%(label)s - Multiple Violations (%(count)s issues)",
                     label=label, count=len(violations))
        violation = violations[:1]
        text = (violation.description or '').strip()
        summary = text[:TITLE_SUMMARY_LENGTH]
        if len(text) > TITLE_SUMMARY_LENGTH:
            summary += '...'
        return f"{label} - {violation.code}: {summary}"

    # -------------------------------------------------------------------------
    # DESCRIPTION SECTIONS
    # -------------------------------------------------------------------------
    @api.model
    def _build_header_lines(self, category, violations):
        lines = [_("Corrective Action Required - %s", self._get_category_label(category))]
        for inspection in violations.inspection_id:
            reference = inspection.name
            if inspection.report_number:
                reference = f"{reference} / {inspection.report_number}"
            lines.append(_("Inspection: %(ref)s (%(date)s)",
                           ref=reference, date=fields.Date.to_string(inspection.inspection_date)))
        return lines

    @api.model
    def _build_violation_lines(self, index, violation):
        lines = [f"{index}. {violation.code}: {(violation.description or '').strip()}"]
        if violation.severity:
            lines.append("   " + _("Severity: %s", violation.severity))
        if violation.inspector_comments:
            lines.append("   " + _("Inspector Comments: %s", violation.inspector_comments.strip()))
        if violation.out_of_service:
            lines.append("   " + _("⚠️ OUT OF SERVICE: This violation resulted in an out-of-service order."))
            if violation.out_of_service_date:
                lines.append("   " + _("Out of Service Date: %s",
                                       fields.Date.to_string(violation.out_of_service_date)))
            lines.append("   " + _("Equipment/Driver must be returned to service before resuming operations."))
        return lines

    @api.model
    def _build_context_lines(self, category, violations):
        lines = []
        if category == 'equipment':
            vehicles = violations.inspection_id.vehicle_ids.sorted('id')
            if vehicles:
                lines.append(_("Involved Equipment:"))
                lines.extend(f"- {vehicle._get_caf_equipment_label()}" for vehicle in vehicles)
        elif category == 'driver':
            drivers = violations.inspection_id.driver_id.sorted('id')
            if drivers:
                lines.append(_("Driver Involved:"))
                for driver in drivers:
                    label = driver.name
                    if driver.job_title:
                        label = f"{label} ({driver.job_title})"
                    lines.append(f"- {label}")
        return lines

    @api.model
    def _build_regulatory_lines(self, violations):
        classifier = self.env['fleet.caf.classifier']
        references = []
        for violation in violations:
            reference = violation.violation_code_id.section or f"49 CFR {classifier.normalize_code(violation.code)}"
            if reference not in references:
                references.append(reference)
        return [_("Regulatory References:")] + [f"- {reference}" for reference in references]

    @api.model
    def _build_description(self, category, violations):
        sections = [
            self._build_header_lines(category, violations),
            [_("Violations (%s):", len(violations))] + [
                line
                for index, violation in enumerate(violations, start=1)
                for line in self._build_violation_lines(index, violation)
            ],
            [_("Required Actions:")] + [
                f"{index}. {action}"
                for index, action in enumerate(self._get_required_actions(category), start=1)
            ],
            self._build_context_lines(category, violations),
            self._build_regulatory_lines(violations),
            [
                _("Due Date: Must be completed within regulatory timeframes."),
                _("Documentation: All corrective actions must be documented with supporting evidence."),
            ],
        ]
        return "\n\n".join("\n".join(lines) for lines in sections if lines)

    @api.model
    def describe(self, category, violations):
        """Title and description of the CAF covering ``violations``.

        Returns:
            dict: {'title': str, 'description': str}
        """
        return {
            'title': self._build_title(category, violations),
            'description': self._build_description(category, violations),
        }
