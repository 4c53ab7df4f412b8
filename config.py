APP_NAME = "Lifestyle Budget & Retirement Runway"

# Projection horizon (plot always runs to this age)
HORIZON_AGE = 100
# Input bounds offered by the page
MAX_RETIREMENT_AGE = 80
MAX_RETURN_PCT = 15.0

# Default inputs for a fresh session (two-partner household, monthly amounts)
DEFAULTS = {
    # Income (net, monthly)
    "partner1_income": 2500,
    "partner2_income": 3000,

    # Projection
    "partner1_age": 30,
    "partner2_age": 32,
    "current_savings": 50_000,
    "retirement_age": 65,
    "annual_return_pct": 0.0,         # 0 = the plain linear model

    # Lifestyle selections (preset ids per category)
    "selections": {
        "housing": ["apartment"],
        "groceries": ["standard"],
        "car": ["sedan"],
        "leisure": ["hobbies"],
        "travel": ["road-trip"],
    },

    # Quick what-ifs
    "whatif_save_more": 200,          # extra monthly saving
    "whatif_retire_later": 2,         # years
    "whatif_spend_less_pct": 10,      # % cut of retirement spend
}
