# -*- coding: utf-8 -*-
# Part of Odoo. See LICENSE file for full copyright and licensing details.

{
    'name': 'DOT Compliance - Corrective Action Forms',
    'version': '19.0.1.0.0',
    'category': 'Operations/Fleet',
    'sequence': 96,
    'summary': 'Roadside inspections, DOT violations and automatic Corrective Action Form assignment',
    'description': """
DOT Corrective Action Forms
===========================

Turns the violations recorded on a roadside inspection into Corrective
Action Forms (CAF) assigned to the right people.

**Main features:**

* **Roadside inspections:**
    - Automatic references (RINS-0001)
    - CVSA level, location, inspected driver and equipment
    - Violations with out-of-service orders and inspector comments

* **Violation classification:**
    - Driver / Equipment / Company responsibility
    - Violation code catalogue (49 CFR sections) with authoritative type
    - Regulatory code prefix fallback (390 to 396)

* **CAF generation:**
    - One CAF per responsibility group and inspection
    - Priority from out-of-service status and high-severity codes
    - Due dates J+15 (critical) / J+30
    - Sequential numbers per year (CAF-2026-0001) with collision retry
    - Structured corrective-action narrative

* **Staff routing:**
    - Position / department keyword rules, configurable per company
    - Fallback to CAF approvers, then any active employee

""",
    'author': 'Équipe Développement Odoo',
    'website': 'https://www.odoo.com',
    'depends': [
        'base',
        'mail',
        'hr',
        'fleet',
    ],
    'data': [
        # Security first
        'security/ir.model.access.csv',

        # Base data
        'data/ir_sequence_data.xml',
        'data/ir_config_parameter_data.xml',
    ],
    'installable': True,
    'application': False,
    'auto_install': False,
    'license': 'LGPL-3',
}
