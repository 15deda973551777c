"""
Recommendations Presentation Layer

REST endpoints for template-based plant care recommendations.
"""
