"""Default category catalog for zero-based budgeting.

The catalog is plain data. Changing any value changes what new users get, so
bump CATALOG_VERSION with every edit.
"""

from collections import Counter

from zerobudget.models.category_schemas import CategoryTemplate
from zerobudget.models.enums import CategoryType

CATALOG_VERSION = "1"

# (name, description, color, icon, type)
_CATALOG_ROWS: tuple[tuple[str, str, str, str, str], ...] = (
    # NEEDS
    ("Housing", "Rent, mortgage, utilities, maintenance", "#ef4444", "FaHome", "need"),
    ("Transportation", "Gas, car payment, insurance, maintenance", "#3b82f6", "FaCar", "need"),
    ("Groceries", "Food and household essentials", "#22c55e", "FaShoppingCart", "need"),
    ("Healthcare", "Medical, dental, prescriptions", "#f59e0b", "FaHeartbeat", "need"),
    ("Insurance", "Health, life, disability insurance", "#8b5cf6", "FaShield", "need"),
    ("Utilities", "Electric, water, gas, internet, phone", "#06b6d4", "FaBolt", "need"),
    # WANTS
    ("Dining Out", "Restaurants, takeout, coffee", "#ec4899", "FaUtensils", "want"),
    ("Entertainment", "Movies, subscriptions, hobbies", "#f97316", "FaTv", "want"),
    ("Shopping", "Clothes, electronics, non-essentials", "#a855f7", "FaBag", "want"),
    ("Travel", "Vacations, trips, experiences", "#84cc16", "FaPlane", "want"),
    ("Personal Care", "Haircuts, gym, beauty, wellness", "#14b8a6", "FaSpa", "want"),
    # SAVINGS
    ("Emergency Fund", "3-6 months of expenses", "#dc2626", "FaPiggyBank", "savings"),
    ("Retirement", "401k, IRA, long-term savings", "#059669", "FaChartLine", "savings"),
    ("Investment", "Stocks, bonds, mutual funds", "#7c3aed", "FaCoins", "savings"),
    ("Vacation Fund", "Saving for future trips", "#0891b2", "FaUmbrella", "savings"),
    # DEBT
    ("Credit Cards", "Credit card payments", "#991b1b", "FaCreditCard", "debt"),
    ("Student Loans", "Education loan payments", "#1f2937", "FaGraduationCap", "debt"),
    ("Personal Loans", "Other loan payments", "#374151", "FaHandshake", "debt"),
)

DEFAULT_CATEGORIES: tuple[CategoryTemplate, ...] = tuple(
    CategoryTemplate(
        name=name,
        description=description,
        color=color,
        icon=icon,
        type=CategoryType(type_),
        is_default=True,
    )
    for name, description, color, icon, type_ in _CATALOG_ROWS
)


def get_default_categories() -> tuple[CategoryTemplate, ...]:
    """Return the default category templates in catalog order."""
    return DEFAULT_CATEGORIES


def count_by_type() -> dict[CategoryType, int]:
    """Number of catalog entries per classification."""
    counts = Counter(template.type for template in DEFAULT_CATEGORIES)
    return {category_type: counts.get(category_type, 0) for category_type in CategoryType}
