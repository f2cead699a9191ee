"""
Rental domain constants — inquiry lifecycle states and Supabase table names.

The full sets of platform sizes, mobility aids and inquiry statuses are the
Literal types in pricing/models.py and schemas/inquiries.py.
"""

INQUIRY_STATUS_NEW: str = "new"
INQUIRY_STATUS_QUOTED: str = "quoted"

# Supabase table names
INQUIRIES_TABLE: str = "inquiries"
QUOTES_TABLE: str = "quotes"
RENTALS_TABLE: str = "rentals"
