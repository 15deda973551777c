from .care_guides import CARE_GUIDES, DEFAULT_GUIDE_KEY

__all__ = ["CARE_GUIDES", "DEFAULT_GUIDE_KEY"]
