"""
Table names and backend constants shared by the service layer.

Table names match the Supabase schema in supabase/migrations/.
"""

TABLES = {
    'USER_PROFILES': 'user_profiles',
    'INCOME': 'income',
    'EXPENSES': 'expenses',
    'INVESTMENTS': 'investments',
    'SAVINGS': 'savings',
    'BUDGETS': 'budgets',
}

# PostgREST error code for a single-row request that matched zero rows
NO_ROWS_CODE = 'PGRST116'

# Trailing window used by the monthly analytics query
MONTHLY_WINDOW_MONTHS = 6

OAUTH_PROVIDER_GOOGLE = 'google'
