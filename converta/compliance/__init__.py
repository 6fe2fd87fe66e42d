"""
UK compliance recommendations.
"""
from converta.compliance.engine import generate_compliance_recommendation
from converta.compliance.uk_requirements import (
    UK_CUSTOMS_REQUIREMENTS,
    UK_PRODUCT_STANDARDS,
    get_customs_requirements,
    get_product_standards,
)

__all__ = [
    "UK_CUSTOMS_REQUIREMENTS",
    "UK_PRODUCT_STANDARDS",
    "generate_compliance_recommendation",
    "get_customs_requirements",
    "get_product_standards",
]
