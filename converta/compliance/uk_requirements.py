"""
UK import/export requirements and product standards.

Static reference data. Filtered per business by the compliance generator.
"""
from converta.models.business import BusinessType, normalize_industry
from converta.models.results import CustomsRequirement, ProductStandard


_CUSTOMS_REQUIREMENTS_DATA = [
    # Legal and regulatory essentials
    {
        "id": "uk-eori",
        "name": "UK EORI Number",
        "description": "Economic Operator Registration and Identification number required for customs declarations when importing/exporting goods to/from the UK",
        "required": True,
        "applicable_to": "goods",
        "estimated_cost": "Free",
        "time_to_complete": "1-5 working days",
        "link": "https://www.gov.uk/eori",
    },
    {
        "id": "companies-house",
        "name": "UK Company Registration (Companies House)",
        "description": "Required if you plan to have a UK presence, open a warehouse, or sell directly (B2C/B2B)",
        "required": False,
        "applicable_to": "all",
        "estimated_cost": "£12-£100",
        "time_to_complete": "24 hours - 1 week",
        "link": "https://www.gov.uk/government/organisations/companies-house",
    },
    {
        "id": "vat-registration",
        "name": "UK VAT Registration",
        "description": "Required if taxable turnover exceeds £90,000 or if you store goods in the UK",
        "required": False,
        "applicable_to": "all",
        "estimated_cost": "Free",
        "time_to_complete": "1-4 weeks",
        "link": "https://www.gov.uk/vat-registration",
    },
    {
        "id": "responsible-person",
        "name": "UK Responsible Person / Importer of Record",
        "description": "Mandatory for products requiring regulatory compliance (e.g. cosmetics, electronics, medical devices). Must be a UK-based entity.",
        "required": True,
        "applicable_to": "goods",
        "estimated_cost": "£500-£5,000/year",
        "time_to_complete": "1-4 weeks",
        "link": "https://www.gov.uk/guidance/placing-manufactured-goods-on-the-uk-market",
    },
    {
        "id": "hs-code",
        "name": "Trade Tariff Classification (HS Code)",
        "description": "Harmonised System codes determine duty rates and required import documentation for every product",
        "required": True,
        "applicable_to": "goods",
        "estimated_cost": "Free (self-classification) or £500+ (professional)",
        "time_to_complete": "1-7 days",
        "link": "https://www.gov.uk/trade-tariff",
    },
    # Customs and logistics
    {
        "id": "customs-declarations",
        "name": "Commodity Codes & Customs Declarations",
        "description": "Identify goods, calculate duties, and declare to HMRC through the Customs Declaration Service",
        "required": True,
        "applicable_to": "goods",
        "estimated_cost": "£20-£100 per declaration (agent fees)",
        "time_to_complete": "Per shipment",
        "link": "https://www.gov.uk/guidance/customs-declaration-service",
    },
    {
        "id": "origin-documentation",
        "name": "Origin Documentation (EUR.1, Certificate of Origin)",
        "description": "Needed for preferential tariffs under trade agreements such as the UK-Turkey Free Trade Agreement",
        "required": False,
        "applicable_to": "goods",
        "estimated_cost": "£20-£50 per certificate",
        "time_to_complete": "1-3 days",
        "link": "https://www.gov.uk/guidance/get-proof-of-origin-for-your-goods",
    },
    {
        "id": "commercial-invoice",
        "name": "Commercial Invoice & Packing List",
        "description": "Standard customs documentation showing full shipment details, required for every shipment",
        "required": True,
        "applicable_to": "goods",
        "estimated_cost": "Free (internal)",
        "time_to_complete": "Per shipment",
    },
    {
        "id": "import-licenses",
        "name": "Import Licenses",
        "description": "Required for restricted items like chemicals, food, plants, arms and dual-use goods",
        "required": False,
        "applicable_to": "goods",
        "estimated_cost": "£0-£500+",
        "time_to_complete": "2-8 weeks",
        "link": "https://www.gov.uk/guidance/import-controls",
    },
    {
        "id": "incoterms",
        "name": "Incoterms Agreement",
        "description": "International Commercial Terms defining who is responsible for transport, insurance and duties in every trade contract",
        "required": True,
        "applicable_to": "goods",
        "estimated_cost": "Free (contractual)",
        "time_to_complete": "Per contract",
    },
    # Financial setup
    {
        "id": "uk-bank-account",
        "name": "UK Bank Account or Payment Gateway",
        "description": "Needed for transactions, refunds and marketplace payouts",
        "required": False,
        "applicable_to": "all",
        "estimated_cost": "£0-£30/month",
        "time_to_complete": "2-6 weeks",
        "link": "https://www.gov.uk/business-bank-account",
    },
    {
        "id": "vat-representative",
        "name": "VAT Representative or Fiscal Agent",
        "description": "For non-UK businesses that must file VAT but have no UK presence",
        "required": False,
        "applicable_to": "all",
        "estimated_cost": "£1,000-£5,000/year",
        "time_to_complete": "1-2 weeks",
    },
    {
        "id": "customs-duty-vat",
        "name": "Customs Duty and Import VAT Payments",
        "description": "Duties depend on HS code, origin country and trade agreements, and are paid on every import",
        "required": True,
        "applicable_to": "goods",
        "estimated_cost": "Variable (0-20%+ of goods value)",
        "time_to_complete": "Per shipment",
    },
]

_PRODUCT_STANDARDS_DATA = [
    {
        "id": "ukca-marking",
        "name": "UKCA Marking",
        "description": "UK Conformity Assessed marking required for most manufactured goods sold in Great Britain (machinery, electronics, PPE, toys, etc.)",
        "applicable_industries": ["Manufacturing", "Technology", "Retail", "E-commerce"],
        "required": True,
        "link": "https://www.gov.uk/guidance/using-the-ukca-marking",
    },
    {
        "id": "ce-marking",
        "name": "CE Marking (Northern Ireland)",
        "description": "CE marking is still accepted in Northern Ireland under the Windsor Framework",
        "applicable_industries": ["Manufacturing", "Technology", "Retail"],
        "required": False,
        "link": "https://www.gov.uk/guidance/ce-marking",
    },
    {
        "id": "labelling-compliance",
        "name": "Labelling Compliance",
        "description": "Country of origin, manufacturer details, safety warnings and conformity marks must be displayed on all consumer products",
        "applicable_industries": ["Manufacturing", "Retail", "E-commerce", "Food & Beverage"],
        "required": True,
        "link": "https://www.gov.uk/product-safety-for-businesses",
    },
    {
        "id": "reach-compliance",
        "name": "UK REACH Compliance",
        "description": "Registration, Evaluation, Authorisation and Restriction of Chemicals",
        "applicable_industries": ["Manufacturing", "Chemicals", "Cosmetics"],
        "required": True,
        "link": "https://www.hse.gov.uk/reach/",
    },
    {
        "id": "rohs-compliance",
        "name": "RoHS Compliance",
        "description": "Restriction of Hazardous Substances in electrical and electronic equipment",
        "applicable_industries": ["Technology", "Electronics", "Manufacturing"],
        "required": True,
        "link": "https://www.gov.uk/guidance/rohs-compliance-and-guidance",
    },
    {
        "id": "fsa-registration",
        "name": "Food Standards Agency (FSA) Registration",
        "description": "Required for food exporters, manufacturers and distributors",
        "applicable_industries": ["Food & Beverage"],
        "required": True,
        "link": "https://www.food.gov.uk/business-guidance",
    },
    {
        "id": "mhra-approval",
        "name": "MHRA Approval",
        "description": "Medicines and Healthcare products Regulatory Agency approval for medical and pharmaceutical goods",
        "applicable_industries": ["Healthcare", "Pharmaceuticals", "Medical Devices"],
        "required": True,
        "link": "https://www.gov.uk/government/organisations/medicines-and-healthcare-products-regulatory-agency",
    },
    {
        "id": "defra-approval",
        "name": "DEFRA Approval",
        "description": "Department for Environment, Food & Rural Affairs approval for agricultural and animal products",
        "applicable_industries": ["Agriculture", "Food & Beverage", "Pet Products"],
        "required": True,
        "link": "https://www.gov.uk/government/organisations/department-for-environment-food-rural-affairs",
    },
]

UK_CUSTOMS_REQUIREMENTS: tuple[CustomsRequirement, ...] = tuple(
    CustomsRequirement(**data) for data in _CUSTOMS_REQUIREMENTS_DATA
)
UK_PRODUCT_STANDARDS: tuple[ProductStandard, ...] = tuple(
    ProductStandard(**data) for data in _PRODUCT_STANDARDS_DATA
)


def get_customs_requirements(business_type: BusinessType) -> list[CustomsRequirement]:
    """
    Customs requirements that apply to a type of business.

    Service businesses only see the items that apply to everyone (or to
    services). Goods businesses see everything for goods plus anything
    specific to their own type; `both` sees every item.
    """
    if business_type == BusinessType.SERVICES:
        return [
            req for req in UK_CUSTOMS_REQUIREMENTS
            if req.applicable_to in ("all", "services")
        ]
    return [
        req for req in UK_CUSTOMS_REQUIREMENTS
        if req.applicable_to in ("all", "goods")
        or business_type == BusinessType.BOTH
        or req.applicable_to == business_type.value
    ]


def get_product_standards(industry: str | None) -> list[ProductStandard]:
    """Product standards whose industries overlap the given industry label."""
    key = normalize_industry(industry)
    if not key:
        return []
    matched = []
    for std in UK_PRODUCT_STANDARDS:
        for applicable in std.applicable_industries:
            applicable_key = normalize_industry(applicable)
            if key in applicable_key or applicable_key in key:
                matched.append(std)
                break
    return matched
