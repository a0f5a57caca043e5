from claim_match.runners.local import LocalClaimPipeline

__all__ = ["LocalClaimPipeline"]
