"""Seed portfolio loaded into a fresh session."""

from __future__ import annotations
from typing import List

from models.project import ProjectRecord


SAMPLE_PROJECTS = [
    {
        'id': '1', 'code': 'PRJ-001', 'name': 'Refinery Modernization Phase 2',
        'type': 'CAPEX', 'category': 'Large', 'stage': 'Execution',
        'business_owner': 'Upstream Division', 'pm': 'A. Ivanov',
        'start_date_plan': '2023-01-10', 'start_date_fact': '2023-01-15',
        'end_date_plan': '2024-12-30', 'end_date_forecast': '2025-02-15',
        'is_critical_path': True, 'schedule_deviation_days': 47,
        'bac': 12500, 'eac': 13200, 'cost_reason': 'Steel price escalation',
        'design_percent': 100, 'smr_plan': 55, 'smr_fact': 45, 'equipment_percent': 80, 'pnr_percent': 5,
        'pv': 5600, 'ev': 4800, 'ac': 5400,
        'risk_schedule': 3, 'risk_cost': 2, 'risk_contract': 1,
        'open_issues_count': 12, 'change_requests_count': 4,
        'components': [
            {'id': 'c1', 'name': 'Hydrocracker Unit', 'type': 'Construction', 'progress': 52},
            {'id': 'c2', 'name': 'Compressor Train', 'type': 'Equipment', 'progress': 80},
            {'id': 'c3', 'name': 'Detailed Design', 'type': 'Design', 'progress': 100},
        ],
        'tasks': [
            {'id': 't1', 'title': 'Approve recovery schedule', 'category': 'Planning', 'status': 'In Progress', 'assignee': 'A. Ivanov'},
            {'id': 't2', 'title': 'Close out steel claim', 'category': 'Procurement', 'status': 'Pending'},
        ],
    },
    {
        'id': '2', 'code': 'PRJ-002', 'name': 'ERP System Rollout',
        'type': 'IT', 'category': 'Medium', 'stage': 'Planning',
        'business_owner': 'IT Department', 'pm': 'B. Smagulov',
        'start_date_plan': '2023-06-01', 'start_date_fact': '2023-06-01',
        'end_date_plan': '2024-06-01', 'end_date_forecast': '2024-06-15',
        'schedule_deviation_days': 14,
        'bac': 4500, 'eac': 4600,
        'design_percent': 70,
        'pv': 2150, 'ev': 2200, 'ac': 2100,
        'risk_schedule': 1, 'risk_cost': 1, 'risk_contract': 2,
        'open_issues_count': 3, 'change_requests_count': 1,
        'tasks': [
            {'id': 't3', 'title': 'Data migration dry run', 'category': 'Engineering', 'status': 'Done'},
        ],
    },
    {
        'id': '3', 'code': 'PRJ-003', 'name': 'Gas Processing Plant',
        'type': 'CAPEX', 'category': 'Large', 'stage': 'Feasibility',
        'business_owner': 'Gas Division', 'pm': 'S. Petrov',
        'start_date_plan': '2022-05-10', 'start_date_fact': '2022-05-10',
        'end_date_plan': '2026-12-30', 'end_date_forecast': '2027-08-20',
        'is_critical_path': True, 'schedule_deviation_days': 233,
        'bac': 45000, 'eac': 52000, 'cost_reason': 'Scope growth after FEED',
        'design_percent': 40, 'smr_plan': 25, 'smr_fact': 10, 'equipment_percent': 15,
        'pv': 9000, 'ev': 6200, 'ac': 8500,
        'risk_schedule': 3, 'risk_cost': 3, 'risk_contract': 2,
        'open_issues_count': 45, 'change_requests_count': 12,
        'components': [
            {'id': 'c4', 'name': 'Site Preparation', 'type': 'Construction', 'progress': 30},
            {'id': 'c5', 'name': 'FEED Package', 'type': 'Design', 'progress': 60},
        ],
    },
    {
        'id': '4', 'code': 'PRJ-004', 'name': 'Landfill Remediation',
        'type': 'HSE', 'category': 'Small', 'stage': 'Commissioning',
        'business_owner': 'Environmental Monitoring', 'pm': 'D. Kozlov',
        'start_date_plan': '2023-10-01', 'start_date_fact': '2023-10-05',
        'end_date_plan': '2024-03-30', 'end_date_forecast': '2024-03-30',
        'bac': 800, 'eac': 780,
        'design_percent': 100, 'smr_plan': 95, 'smr_fact': 95, 'equipment_percent': 100, 'pnr_percent': 40,
        'pv': 680, 'ev': 700, 'ac': 650,
        'open_issues_count': 1,
    },
    {
        'id': '5', 'code': 'PRJ-005', 'name': 'South Field Development',
        'type': 'CAPEX', 'category': 'Large', 'stage': 'Idea',
        'business_owner': 'Exploration', 'pm': 'E. Bekov',
        'start_date_plan': '2024-01-01', 'start_date_fact': '',
        'end_date_plan': '2029-12-30', 'end_date_forecast': '2029-12-30',
        'bac': 120000, 'eac': 120000,
        'risk_schedule': 2,
    },
    {
        'id': '6', 'code': 'PRJ-006', 'name': 'Fleet Telemetry Upgrade',
        'type': 'OPEX', 'category': 'Small', 'stage': 'Execution',
        'business_owner': 'Logistics', 'pm': 'M. Nurlanova',
        'start_date_plan': '2024-02-01', 'start_date_fact': '2024-02-12',
        'end_date_plan': '2024-11-30', 'end_date_forecast': '2024-12-10',
        'schedule_deviation_days': 10,
        'bac': 350, 'eac': 360,
        'smr_plan': 40, 'smr_fact': 36, 'equipment_percent': 60,
        'pv': 125, 'ev': 118, 'ac': 120,
        'change_requests_count': 2,
    },
]


def load_sample_projects() -> List[ProjectRecord]:
    """Build fresh records for the seed portfolio."""
    return [ProjectRecord.from_dict(data) for data in SAMPLE_PROJECTS]
