"""Flags feed entries that touch health care policy.

The match is a plain case-insensitive substring test. Short terms such as
"ems" or "con " will also fire inside unrelated words; that is a known
limitation of the flat list, not something to patch around here.
"""

HEALTH_KEYWORDS_VERSION = "2025.1"

HEALTH_KEYWORDS: tuple[str, ...] = (
    # Core clinical and program vocabulary
    "health", "hospital", "medicaid", "medicare", "physician", "nurse",
    "pharmacy", "pharmaceutical", "drug", "mental health", "behavioral",
    "insurance", "provider", "patient", "medical", "clinical", "care",
    "telehealth", "telemedicine", "opioid", "substance abuse", "vaccine",
    "immunization", "public health", "epidemic", "pandemic", "disease",
    "dental", "optometry", "therapy", "rehabilitation", "emergency",
    "ambulance", "ems",
    # Regulatory and financing
    "certificate of need", "con ", "medicaid expansion", "340b",
    "reimbursement", "dhhs", "hhs", "nursing", "assisted living",
    "long-term care", "home health", "hospice", "wellness", "maternal",
    "infant", "prenatal", "behavioral health", "psychiatric", "disability",
    "biotech", "biologics", "generic drug", "prescription", "copay",
    "deductible", "premium", "coverage", "uninsured", "underinsured",
    "workforce shortage", "scope of practice", "licensure", "trauma",
    # Conditions and treatment
    "cancer", "chronic", "obesity", "diabetes", "cardiovascular",
    "fentanyl", "naloxone", "narcan", "overdose", "addiction",
    "eating disorder", "anorexia", "bulimia", "suicide prevention",
    "child welfare", "foster care", "abuse", "neglect",
    "organ donation", "transplant", "blood bank",
    # Health policy
    "health equity", "disparity", "social determinants",
    "community health", "rural health", "critical access",
    "ambulatory", "outpatient", "inpatient", "surgical center",
    "value-based", "fee-for-service", "managed care",
    "prior authorization", "utilization review", "network adequacy",
)


def is_health_related(title: str, synopsis: str = "") -> bool:
    """Whether a title/synopsis pair mentions any health keyword."""
    text = f"{title} {synopsis}".casefold()
    return any(keyword in text for keyword in HEALTH_KEYWORDS)
