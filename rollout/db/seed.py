"""Startup data for the rollout program (pilot + remaining franchise groups)."""

from typing import Any

from rollout.core.logging import get_logger
from rollout.db.memory_store import MemoryStore

logger = get_logger(__name__)

FRANCHISE_GROUPS: list[dict[str, Any]] = [
    {
        "name": "Sugarloaf",
        "contactName": "Completed Pilot",
        "contactEmail": "pilot@sugarloaf.com",
        "contactPhone": "(555) 100-0001",
        "locationCount": 1,
        "status": "completed",
        "progress": 100,
        "accountingSystem": "QuickBooks",
        "laborPayrollSystem": "ADP",
        "notes": "First pilot location - completed 11/19/25",
    },
    {
        "name": "American Pub",
        "contactName": "Kishan Patel",
        "contactEmail": "kishan@americanpub.us",
        "contactPhone": "(909) 264-1550",
        "locationCount": 2,
        "accountingSystem": "InfoSync",
        "laborPayrollSystem": "InfoSync",
    },
    {
        "name": "Jackmont Hospitality",
        "contactName": "Daniel Halpern",
        "contactEmail": "dhalpern@jackmont.com",
        "contactPhone": "(404) 523-5744",
        "locationCount": 21,
        "progress": 5,
        "accountingSystem": "Great Plains",
        "notes": "Largest franchise group",
    },
    {
        "name": "Maui One",
        "contactName": "Anil Yadav",
        "contactEmail": "anil@yadavgroup.net",
        "contactPhone": "(510) 792-2628",
        "locationCount": 28,
        "status": "in_progress",
        "progress": 15,
        "accountingSystem": "Sage Intacct",
    },
    {
        "name": "Mera",
        "contactName": "Rafael Aguirre",
        "contactEmail": "rafaelat@meracorporation.com",
        "contactPhone": "+52 (998) 845-6064",
        "locationCount": 5,
        "accountingSystem": "Sage Intacct",
        "laborPayrollSystem": "UKG",
    },
    {
        "name": "Metz Culinary",
        "contactName": "Jeff Metz",
        "contactEmail": "jeffm@metzcorp.com",
        "contactPhone": "(570) 674-8731",
        "locationCount": 7,
        "accountingSystem": "Business Central",
    },
    {
        "name": "United Restaurant Group",
        "contactName": "Tony Grillo",
        "contactEmail": "tgrillo@atlanticcoastdining.com",
        "contactPhone": "(804) 747-5050",
        "locationCount": 9,
        "accountingSystem": "Sage 100 ERP",
        "laborPayrollSystem": "Paycom",
    },
    {
        "name": "CFC Stripes",
        "contactName": "Jill Cygan",
        "contactEmail": "jcygan@cfcmgmt.com",
        "contactPhone": "(216) 328-1121",
        "locationCount": 2,
        "accountingSystem": "Restaurant 365",
        "laborPayrollSystem": "MinuteMen HR",
    },
    {
        "name": "Bridgeport Restaurant Group",
        "contactName": "John Mosesso",
        "contactEmail": "jmoerentals@frontier.com",
        "contactPhone": "(304) 203-4172",
        "locationCount": 1,
        "accountingSystem": "InProcess Company",
        "laborPayrollSystem": "InProcess Company",
    },
    {
        "name": "Cedar Fair",
        "contactName": "TBD",
        "locationCount": 1,
        "status": "on_hold",
        "accountingSystem": "J.D. Edwards",
        "laborPayrollSystem": "Kronos / UKG",
        "notes": "Contact to be verified",
    },
    {
        "name": "Village XIII",
        "contactName": "Dale Holt",
        "contactEmail": "dholt44@sbcglobal.net",
        "contactPhone": "(217) 356-5789",
        "locationCount": 1,
        "accountingSystem": "QuickBooks",
        "laborPayrollSystem": "Custom Computing Inc",
    },
    {
        "name": "VNE",
        "contactName": "Jeremy Gardner",
        "contactEmail": "jgardnermail@gmail.com",
        "contactPhone": "(501) 472-1000",
        "locationCount": 2,
        "accountingSystem": "QuickBooks",
        "laborPayrollSystem": "Paychex PEO",
    },
    {
        "name": "RLJ Development",
        "contactName": "Eric Rogers",
        "contactEmail": "erogers@rljlodgingtrust.com",
        "contactPhone": "(301) 280-7754",
        "locationCount": 1,
        "laborPayrollSystem": "Kronos / UKG",
    },
]

DELIVERABLES: list[dict[str, Any]] = [
    {
        "title": "Franchise Rollout Playbook",
        "description": "Complete guide for remaining franchisees including process, communication, and training kit",
        "type": "document",
        "category": "playbook",
        "createdAt": "2025-12-04",
        "updatedAt": "2025-12-31",
        "status": "review",
    },
    {
        "title": "Master Rollout Tracker",
        "description": "Centralized tracking for all franchise groups with schedule, surveys, and milestones",
        "type": "spreadsheet",
        "category": "tracking",
        "createdAt": "2025-11-01",
        "updatedAt": "2025-12-31",
        "status": "final",
    },
    {
        "title": "Site Survey Hardware Tracking",
        "description": "Track site surveys and hardware orders/installation for each location",
        "type": "spreadsheet",
        "category": "tracking",
        "createdAt": "2025-11-15",
        "updatedAt": "2025-12-31",
        "status": "final",
    },
    {
        "title": "Issue Management Log",
        "description": "Centralized issue tracking for all rollout-related problems",
        "type": "spreadsheet",
        "category": "tracking",
        "sheetUrl": "https://docs.google.com/spreadsheets/d/example-issues",
        "createdAt": "2025-11-20",
        "updatedAt": "2025-12-18",
        "status": "final",
    },
    {
        "title": "Franchisee Communication Templates",
        "description": "Email and meeting templates for franchisee onboarding and updates",
        "type": "document",
        "category": "communication",
        "createdAt": "2025-12-01",
        "updatedAt": "2025-12-15",
    },
    {
        "title": "CT/Toast Training Materials",
        "description": "Training guides and resources for Crunchtime and Toast systems",
        "type": "presentation",
        "category": "training",
        "createdAt": "2025-11-25",
        "updatedAt": "2025-12-10",
        "status": "final",
    },
    {
        "title": "Integration Assessment Matrix",
        "description": "System integration needs and nuances for each franchise group",
        "type": "spreadsheet",
        "category": "tracking",
        "sheetUrl": "https://docs.google.com/spreadsheets/d/example-integration",
        "createdAt": "2025-12-05",
        "updatedAt": "2025-12-16",
        "status": "review",
    },
    {
        "title": "Sugarloaf Lessons Learned",
        "description": "Key learnings from the Sugarloaf pilot rollout",
        "type": "report",
        "category": "playbook",
        "createdAt": "2025-11-20",
        "updatedAt": "2025-12-04",
        "status": "final",
    },
]


def seed_store(store: MemoryStore) -> MemoryStore:
    """
    Load the rollout program's franchise groups and deliverables.

    Initiatives and issues start empty.

    Args:
        store: Store to populate

    Returns:
        The same store, for chaining
    """
    for group in FRANCHISE_GROUPS:
        store.create_franchise_group(group)
    for deliverable in DELIVERABLES:
        store.create_deliverable(deliverable)

    logger.info(
        f"Seeded store with {len(FRANCHISE_GROUPS)} franchise groups "
        f"and {len(DELIVERABLES)} deliverables"
    )
    return store
