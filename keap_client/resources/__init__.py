"""Resource wrappers, one per Keap REST entity."""

from .base import BoundRecord, Resource
from .account_info import AccountInfo, AccountProfile
from .contacts import Contacts, Contact, CreditCard, AppliedTag
from .emails import Emails, EmailRecord
from .opportunities import Opportunities, Opportunity
from .products import Products, Product, SubscriptionPlan
from .ecommerce import (
    Ecommerce,
    Orders,
    Order,
    OrderItem,
    Subscriptions,
    Subscription,
    Transactions,
    Transaction,
)
from .files import Files, FileDescriptor, FileResponse
from .users import Users, User
from .tags import Tags, Tag, TagCategory, TaggedContact, TaggedCompany

__all__ = [
    "Resource",
    "BoundRecord",
    "AccountInfo",
    "AccountProfile",
    "Contacts",
    "Contact",
    "CreditCard",
    "AppliedTag",
    "Emails",
    "EmailRecord",
    "Opportunities",
    "Opportunity",
    "Products",
    "Product",
    "SubscriptionPlan",
    "Ecommerce",
    "Orders",
    "Order",
    "OrderItem",
    "Subscriptions",
    "Subscription",
    "Transactions",
    "Transaction",
    "Files",
    "FileDescriptor",
    "FileResponse",
    "Users",
    "User",
    "Tags",
    "Tag",
    "TagCategory",
    "TaggedContact",
    "TaggedCompany",
]
