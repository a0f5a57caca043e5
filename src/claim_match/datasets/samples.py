from __future__ import annotations

RILEY_CLAIM = """Claim Report - Riley HealthCare LLC
Date of Loss: January 15, 2024
Policy Number: RH-12345-2024
Insured: Riley HealthCare LLC
Address: 742 Evergreen Terrace, Springfield, IL
Claim Type: Property Damage
Description: A burst pipe on the third floor resulted in significant water damage to medical equipment and patient records.
Estimated Loss Amount: $125,000
Adjuster: Jane Smith (smith.adjuster@claimsco.com)"""

QUAIL_CLAIM = """CONFIDENTIAL CLAIM DOCUMENT
Claim #: QC-88442
Filed: February 10, 2024
Adjuster: Alan Reyes
Incident Summary:
On February 8th, 2024, a severe hailstorm impacted the region surrounding Quail Creek. While
multiple properties owned by affiliated companies such as Cypress Pharmaceuticals and Atlas
Retail Group sustained minor damages, the primary loss pertains to a commercial warehouse
owned by Quail Creek RE, located at 4105 Meadowlark Drive.
The facility experienced roof failure and water ingress, affecting stored inventory and mechanical
systems.
Insured Party: Quail Creek RE
Policy #: QCRE-2023-59
Policy Effective: March 1, 2023
Estimated Damage: $342,000"""

EVERGREEN_CLAIM = """Report of Property Loss
Ref#: #SP-90219
Filed: 03/12/2024
Analyst: M. BURNS
Affected Location:
410 South Industrial Way
Ownership information on record includes Evergreen Farms Ltd.
(primary entity) and maintenance subcontractor Urban Grid Construction.
Damage was reported by the on-site facilities coordinator, who noted
structural degradation likely stemming from roof rot compounded by
water intrusion.
Please refer to Evergreen Farms LTD as the primary account holder
for policy #EVG-2024-981."""

DEFAULT_CLAIM = """Insurance Claim Document
Claim Number: DEFAULT-1234
Policy: POL-9876-2024
Insured: Default Insurance Client Inc.
Date of Loss: April 1, 2024
Type: General Liability
Amount: $75,000
Description: Default claim for testing purposes."""

SAMPLE_CLAIMS: dict[str, str] = {
    "riley": RILEY_CLAIM,
    "quail": QUAIL_CLAIM,
    "evergreen": EVERGREEN_CLAIM,
    "default": DEFAULT_CLAIM,
}

_FILENAME_HINTS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("sample1", "riley"), "riley"),
    (("sample2", "quail"), "quail"),
    (("sample3", "evergreen"), "evergreen"),
)


def sample_for_filename(file_name: str) -> str | None:
    """Return the demo document a file name points at, if any."""
    lowered = file_name.lower()
    for hints, key in _FILENAME_HINTS:
        if any(hint in lowered for hint in hints):
            return SAMPLE_CLAIMS[key]
    return None
