"""Certifications are static reference data, not content-managed."""

from src.portfolio.schemas.content import Certification

CERTIFICATIONS: tuple[Certification, ...] = (
    Certification(
        name="Six Sigma Black Belt",
        abbreviation="SSBB",
        issuer="American Society for Quality (ASQ)",
    ),
    Certification(
        name="Certified in Planning and Inventory Management",
        abbreviation="CPIM",
        issuer="Association for Supply Chain Management (ASCM/APICS)",
    ),
    Certification(
        name="Certified Professional",
        abbreviation="CP",
        issuer="Association of Clinical Research Professionals (ACRP)",
    ),
)
