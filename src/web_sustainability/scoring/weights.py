"""Scoring weight constants for the sustainability score.

The seven factor weights must sum to 1.0. They define what the composite
score means, so any change is a new scoring version, not a tweak.
"""

from web_sustainability.data.models import Factor

# ---------------------------------------------------------------------------
# Factor display names (single source of truth for all modules)
# ---------------------------------------------------------------------------
FACTOR_NAMES = {
    Factor.data_efficiency: "Data Efficiency",
    Factor.resource_count: "Resource Count",
    Factor.media_optimization: "Media Optimization",
    Factor.code_efficiency: "Code Efficiency",
    Factor.loading_efficiency: "Loading Efficiency",
    Factor.user_experience: "User Experience",
    Factor.green_hosting: "Green Hosting",
}

# ---------------------------------------------------------------------------
# Factor weights in the composite score (must sum to 1.0)
# ---------------------------------------------------------------------------
DATA_EFFICIENCY_WEIGHT = 0.35     # Page weight drives CO2 per visit
RESOURCE_COUNT_WEIGHT = 0.20      # HTTP requests and DOM size
GREEN_HOSTING_WEIGHT = 0.15       # Renewable-powered hosting
MEDIA_OPTIMIZATION_WEIGHT = 0.12  # Images dominate page size
CODE_EFFICIENCY_WEIGHT = 0.08     # Unused CSS/JS
LOADING_EFFICIENCY_WEIGHT = 0.07  # Fewer reloads
USER_EXPERIENCE_WEIGHT = 0.03     # Secondary effect

FACTOR_WEIGHTS = {
    Factor.data_efficiency: DATA_EFFICIENCY_WEIGHT,
    Factor.resource_count: RESOURCE_COUNT_WEIGHT,
    Factor.media_optimization: MEDIA_OPTIMIZATION_WEIGHT,
    Factor.code_efficiency: CODE_EFFICIENCY_WEIGHT,
    Factor.loading_efficiency: LOADING_EFFICIENCY_WEIGHT,
    Factor.user_experience: USER_EXPERIENCE_WEIGHT,
    Factor.green_hosting: GREEN_HOSTING_WEIGHT,
}

# ---------------------------------------------------------------------------
# Resource Count sub-score weights (must sum to 1.0)
# ---------------------------------------------------------------------------
RESOURCE_REQUESTS_WEIGHT = 0.6
RESOURCE_DOM_WEIGHT = 0.4
