"""
Closed classification taxonomies for the provider directory

Provider records are tagged with labels drawn from these sets, and the
search filters accept exactly these labels.
"""
from typing import Dict, List, Tuple


USE_CASES: Tuple[str, ...] = (
    "Voice AI",
    "Agentic AI",
    "CRM & Sales Automation",
    "Workflow & Process Automation",
    "AI Content & Marketing",
    "RAG & Knowledge Bases",
    "Data Dashboards & Analytics",
    "Document & Data Processing",
    "Custom AI Development",
    "On-Premise & Private AI",
    "AI Web & App Design",
    "AI Consulting & Education",
)

BUSINESS_FUNCTIONS: Tuple[str, ...] = (
    "Marketing",
    "Sales",
    "Customer Service",
    "Operations",
    "Finance",
    "People / HR",
    "Leadership / Strategy",
    "Legal / Compliance",
)

INDUSTRIES: Tuple[str, ...] = (
    "E-commerce / Retail",
    "SaaS / Technology",
    "Healthcare / Medical",
    "Financial Services / Insurance",
    "Real Estate",
    "Legal Services",
    "Education / EdTech",
    "Construction / Trades / Home Services",
    "Professional Services / Consulting",
    "Media / Entertainment",
    "Cybersecurity",
    "Government / Public Sector",
    "Manufacturing / Logistics",
    "Hospitality / Travel / Food Services",
    "Industry Agnostic",
)

DEFAULT_REGION = "Remote / Other"

REGIONS: Tuple[str, ...] = (
    "North America",
    "Europe",
    "Asia Pacific",
    "Latin America",
    "Middle East",
    "Africa",
    DEFAULT_REGION,
)

# Filter key -> closed label set it is validated against
FILTER_TAXONOMIES: Dict[str, Tuple[str, ...]] = {
    "useCase": USE_CASES,
    "businessFunction": BUSINESS_FUNCTIONS,
    "industry": INDUSTRIES,
    "region": REGIONS,
}


def as_dict() -> Dict[str, List[str]]:
    """Taxonomy payload for clients building filter controls"""
    return {
        "useCases": list(USE_CASES),
        "businessFunctions": list(BUSINESS_FUNCTIONS),
        "industries": list(INDUSTRIES),
        "regions": list(REGIONS),
    }
