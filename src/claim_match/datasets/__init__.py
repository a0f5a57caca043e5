from claim_match.datasets.roster import INSUREDS
from claim_match.datasets.samples import SAMPLE_CLAIMS, sample_for_filename

__all__ = ["INSUREDS", "SAMPLE_CLAIMS", "sample_for_filename"]
