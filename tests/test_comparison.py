from dataclasses import replace

import pytest

from claim_match import ExtractedClaim, MatchType, compare_claims, find_related_claims


@pytest.fixture
def base_claim() -> ExtractedClaim:
    return ExtractedClaim(
        file_name="claim1.pdf",
        policy_number="POL123",
        claim_number="CLM456",
        insured_party="Acme Corp",
        incident_date="2024-01-15",
        claim_type="Property Damage",
        location="123 Main St",
        description="Water damage from burst pipe",
        confidence=0.8,
    )


def test_identifies_duplicate_claims(base_claim: ExtractedClaim) -> None:
    duplicate = replace(
        base_claim,
        file_name="claim2.pdf",
        description="Water damage from a burst pipe on third floor",
    )

    result = compare_claims(base_claim, duplicate)

    assert result.match_type is MatchType.DUPLICATE
    assert result.match_score > 0.8
    assert result.reasons == [
        "Policy numbers match (POL123 and POL123)",
        "Claim numbers match (CLM456 and CLM456)",
        "Insured parties match (Acme Corp and Acme Corp)",
        "Incident dates match (2024-01-15 and 2024-01-15)",
        "Locations match (123 Main St and 123 Main St)",
        "Descriptions contain similar content",
    ]
    assert result.claim_a is base_claim
    assert result.claim_b is duplicate


def test_identifies_related_claims(base_claim: ExtractedClaim) -> None:
    related = replace(
        base_claim,
        file_name="claim3.pdf",
        claim_number="CLM789",
        incident_date="2024-01-16",
        description="Different issue at same location",
        insured_party="Acme Company",
    )

    result = compare_claims(base_claim, related)

    assert result.match_type is MatchType.RELATED
    assert 0.5 < result.match_score < 0.9
    assert result.reasons[0] == "Policy numbers match (POL123 and POL123)"
    assert "Locations match (123 Main St and 123 Main St)" in result.reasons
    assert not any(reason.startswith("Claim numbers") for reason in result.reasons)


def test_partially_similar_claims_just_below_related_cutoff(base_claim: ExtractedClaim) -> None:
    different = ExtractedClaim(
        file_name="claim4.pdf",
        policy_number="POL999",
        claim_number="CLM888",
        insured_party="Other Corp",
        incident_date="2024-03-15",
        claim_type="Liability",
        location="456 Other Ave",
        description="Completely different issue",
        confidence=0.8,
    )

    result = compare_claims(base_claim, different)

    assert 0.45 < result.match_score < 0.5
    assert result.match_type is MatchType.DIFFERENT
    assert result.reasons == ["Incident dates match (2024-01-15 and 2024-03-15)"]


def test_identifies_different_claims(base_claim: ExtractedClaim) -> None:
    different = ExtractedClaim(
        file_name="claim4.pdf",
        policy_number="NS-2019-0000000000000000000000000077",
        claim_number="NORTHSTAR-CARGO-0000000000000000000042",
        insured_party="Northstar Logistics Incorporated of the Pacific Northwest",
        incident_date="the second Tuesday of March in the year 2019",
        location="Warehouse 9, Pier 39, Embarcadero, San Francisco, California",
        description=(
            "Hail dented the roofs of eleven delivery trucks parked in the north lot "
            "during a storm that lasted most of the afternoon and evening"
        ),
        confidence=0.8,
    )

    result = compare_claims(base_claim, different)

    assert result.match_type is MatchType.DIFFERENT
    assert result.match_score < 0.5
    assert result.reasons == ["No significant similarities found"]


def test_claims_without_shared_fields_score_zero() -> None:
    left = ExtractedClaim(policy_number="POL123", claim_number="CLM456")
    right = ExtractedClaim(location="123 Main St", description="Burst pipe")

    result = compare_claims(left, right)

    assert result.match_score == 0.0
    assert result.match_type is MatchType.DIFFERENT
    assert result.reasons == ["No significant similarities found"]


def test_only_present_fields_are_weighted() -> None:
    left = ExtractedClaim(policy_number="POL123", location="123 Main St")
    right = ExtractedClaim(policy_number="POL123")

    result = compare_claims(left, right)

    assert result.match_score == pytest.approx(1.0)
    assert result.match_type is MatchType.DUPLICATE


def test_find_related_claims_scans_each_pair_once(base_claim: ExtractedClaim) -> None:
    copy_one = replace(base_claim, file_name="copy1.pdf")
    copy_two = replace(base_claim, file_name="copy2.pdf")
    unrelated = ExtractedClaim(file_name="other.pdf", policy_number="ZZZZZZZZZZZZZZZZZZZZZZZZ")
    claims = [base_claim, unrelated, copy_one, copy_two]

    matches = find_related_claims(claims)

    pairs = [(m.claim_a.file_name, m.claim_b.file_name) for m in matches]
    assert pairs == [
        ("claim1.pdf", "copy1.pdf"),
        ("claim1.pdf", "copy2.pdf"),
        ("copy1.pdf", "copy2.pdf"),
    ]
    assert len(matches) <= len(claims) * (len(claims) - 1) // 2
    assert all(m.claim_a is not m.claim_b for m in matches)
    assert all(m.match_type is MatchType.DUPLICATE for m in matches)


def test_find_related_claims_handles_small_batches(base_claim: ExtractedClaim) -> None:
    assert find_related_claims([]) == []
    assert find_related_claims([base_claim]) == []
