"""Static occupational taxonomy for healthcare postings.

The hierarchy has three ranks: Category -> Subcategory -> Field. Every
option list is ordered and ends with the ``"Other"`` catch-all. Lookups for
unknown parents degrade to ``["Other"]`` instead of failing.
"""

from types import MappingProxyType
from typing import List, Mapping, Tuple

OTHER = "Other"

CATEGORY_OPTIONS: Tuple[str, ...] = (
    "Doctor",
    "Nurse",
    "Technician",
    "Pharmacy",
    "Support",
    "Admin",
    "Insurance",
    "Marketing",
    OTHER,
)

SUBCATEGORY_OPTIONS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "Doctor": ("Specialist", "Super specialist", "Medicine officer", "RMO", OTHER),
    "Nurse": ("ANM", "GNM", "BSC", OTHER),
    "Technician": (
        "Cathlab", "Dialysis", "Operation theatre", "Laboratory", "Endoscopy", "X-ray", "CT/MRI", OTHER,
    ),
    "Pharmacy": ("D. Pharma", "B. Pharma", OTHER),
    "Support": ("Ward assistant", "OT assistant", "House keeping", "Security", "Accounting", OTHER),
    "Admin": ("Hospital administration", "Operations", "HR", "Finance", OTHER),
    "Insurance": ("Claims", "TPA operations", "Underwriting", "Customer support", OTHER),
    "Marketing": ("Digital marketing", "Field marketing", "Branding", "Sales", OTHER),
    OTHER: (OTHER,),
})

FIELD_OPTIONS: Mapping[str, Mapping[str, Tuple[str, ...]]] = MappingProxyType({
    "Doctor": MappingProxyType({
        "Specialist": (
            "General Physician",
            "Pediatrician",
            "General Surgeon",
            "Orthopedic Surgeon",
            "ENT Specialist",
            "Ophthalmologist",
            "Dermatologist",
            "Psychiatrist",
            "Radiologist",
            "Anesthesiologist",
            "Emergency Physician",
            OTHER,
        ),
        "Super specialist": (
            "Cardiologist",
            "Neurologist",
            "Nephrologist",
            "Gastroenterologist",
            "Endocrinologist",
            "Oncologist",
            "Urologist",
            "Neurosurgeon",
            "CTVS Specialist",
            "Critical Care Specialist",
            OTHER,
        ),
        "Medicine officer": (
            "General Duty Medical Officer",
            "Casualty Medical Officer",
            "ICU Medical Officer",
            "Public Health Medical Officer",
            "Occupational Health Medical Officer",
            OTHER,
        ),
        "RMO": ("Emergency RMO", "ICU RMO", "Ward RMO", "Night Duty RMO", "OT RMO", OTHER),
        OTHER: (OTHER,),
    }),
    "Nurse": MappingProxyType({
        "ANM": ("Community Health Nurse", "Maternal Care Nurse", "Vaccination Nurse", OTHER),
        "GNM": ("Ward Nurse", "ICU Nurse", "Operation Theatre Nurse", "Emergency Nurse", OTHER),
        "BSC": ("Clinical Nurse", "Nurse Educator", "Critical Care Nurse", "Nurse Supervisor", OTHER),
        OTHER: (OTHER,),
    }),
    "Technician": MappingProxyType({
        "Cathlab": ("Cath Lab Technician", OTHER),
        "Dialysis": ("Dialysis Technician", OTHER),
        "Operation theatre": ("OT Technician", "Anesthesia Technician", OTHER),
        "Laboratory": ("Lab Technician", "Phlebotomy Technician", OTHER),
        "Endoscopy": ("Endoscopy Technician", OTHER),
        "X-ray": ("X-ray Technician", OTHER),
        "CT/MRI": ("CT Technician", "MRI Technician", OTHER),
        OTHER: (OTHER,),
    }),
    "Pharmacy": MappingProxyType({
        "D. Pharma": ("Staff Pharmacist", "Dispensing Pharmacist", OTHER),
        "B. Pharma": ("Clinical Pharmacist", "Hospital Pharmacist", "Inventory Pharmacist", OTHER),
        OTHER: (OTHER,),
    }),
    "Support": MappingProxyType({
        "Ward assistant": ("Patient Care Assistant", "Ward Boy / Aya", OTHER),
        "OT assistant": ("OT Assistant", "Sterilization Assistant", OTHER),
        "House keeping": ("Housekeeping Executive", "Infection Control Housekeeping", OTHER),
        "Security": ("Hospital Security Guard", "Security Supervisor", OTHER),
        "Accounting": ("Billing Executive", "Accounts Assistant", OTHER),
        OTHER: (OTHER,),
    }),
    "Admin": MappingProxyType({
        "Hospital administration": ("Hospital Administrator", "Front Office Manager", OTHER),
        "Operations": ("Operations Executive", "Facility Manager", OTHER),
        "HR": ("HR Executive", "Talent Acquisition", OTHER),
        "Finance": ("Finance Executive", "Medical Billing Officer", OTHER),
        OTHER: (OTHER,),
    }),
    "Insurance": MappingProxyType({
        "Claims": ("Claims Processing Officer", "Claims Auditor", OTHER),
        "TPA operations": ("TPA Coordinator", "Insurance Desk Officer", OTHER),
        "Underwriting": ("Medical Underwriter", "Risk Analyst", OTHER),
        "Customer support": ("Insurance Support Executive", "Policy Support Officer", OTHER),
        OTHER: (OTHER,),
    }),
    "Marketing": MappingProxyType({
        "Digital marketing": ("Digital Marketing Executive", "Performance Marketer", OTHER),
        "Field marketing": ("Field Marketing Executive", "Hospital Outreach Executive", OTHER),
        "Branding": ("Brand Manager", "Communications Executive", OTHER),
        "Sales": ("Medical Sales Representative", "Business Development Executive", OTHER),
        OTHER: (OTHER,),
    }),
    OTHER: MappingProxyType({
        OTHER: (OTHER,),
    }),
})

# Department names that mark a posting as a doctor's role when found in its specialization.
MEDICAL_DEPARTMENTS: Tuple[str, ...] = (
    "cardiology",
    "neurology",
    "orthopedics",
    "pediatrics",
    "gynecology",
    "dermatology",
    "psychiatry",
    "radiology",
    "anesthesiology",
    "emergency medicine",
    "internal medicine",
    "surgery",
    "oncology",
    "pathology",
    "ophthalmology",
    "ent",
    "urology",
    "gastroenterology",
    "pulmonology",
    "endocrinology",
    "rheumatology",
    "nephrology",
    "hematology",
    "infectious disease",
    "general medicine",
)

# Specialization checklist offered by the posting wizard and the specialty facet.
SPECIALIZATIONS: Tuple[str, ...] = (
    "General Medicine", "Cardiology", "Neurology", "Orthopedics", "Pediatrics",
    "Gynecology", "Dermatology", "Psychiatry", "Radiology", "Anesthesiology",
    "Emergency Medicine", "Internal Medicine", "Surgery", "Oncology", "Pathology",
    "Ophthalmology", "ENT", "Urology", "Gastroenterology", "Pulmonology",
    "Endocrinology", "Rheumatology", "Nephrology", "Hematology", "Infectious Disease",
    "Physical Therapy", "Occupational Therapy", "Speech Therapy", "Nursing",
    "Pharmacy", "Medical Technology", OTHER,
)

LOCATIONS: Tuple[str, ...] = (
    "Mumbai", "Delhi NCR", "Bangalore", "Pune", "Hyderabad",
    "Chennai", "Kolkata", "Ahmedabad",
)

JOB_TYPES: Tuple[str, ...] = (
    "Full-time",
    "Part-time",
    "Contract",
    "Freelance",
    "Internship",
    "Volunteer",
)


class TaxonomyRegistry:
    """Read-only view over a Category -> Subcategory -> Field hierarchy."""

    def __init__(
        self,
        categories: Tuple[str, ...] = CATEGORY_OPTIONS,
        subcategories: Mapping[str, Tuple[str, ...]] = SUBCATEGORY_OPTIONS,
        fields: Mapping[str, Mapping[str, Tuple[str, ...]]] = FIELD_OPTIONS,
    ):
        self._categories = tuple(categories)
        self._subcategories = subcategories
        self._fields = fields

    def categories(self) -> List[str]:
        """Return the ordered top-level categories."""
        return list(self._categories)

    def subcategories_of(self, category: str) -> List[str]:
        """Return the subcategories of ``category``, or ``["Other"]`` if unknown."""
        return list(self._subcategories.get(category, (OTHER,)))

    def fields_of(self, category: str, subcategory: str) -> List[str]:
        """Return the fields of ``(category, subcategory)``, or ``["Other"]`` if unknown."""
        by_subcategory = self._fields.get(category)
        if by_subcategory is None:
            return [OTHER]
        return list(by_subcategory.get(subcategory, (OTHER,)))

    def is_category(self, value: str) -> bool:
        """Return True when ``value`` is one of the declared categories (case-sensitive)."""
        return value in self._categories


default_registry = TaxonomyRegistry()
