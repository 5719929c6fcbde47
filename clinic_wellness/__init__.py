"""
Clinic Wellness Engine

Wellness scoring, condition-risk assessment and recommendation generation
for clinic patients.
"""
__version__ = "0.1.0"
