"""Resource namespaces for the sevDesk client."""

from .contacts import CommunicationWays, ContactAddresses, Contacts
from .credit_notes import CreditNotes
from .documents import DocumentFolders, Documents
from .invoices import Invoices
from .lookups import Parts, PaymentMethods, SevUsers, StaticCountries, Unities
from .tags import Tags
from .tools import Tools
from .vouchers import VoucherPositions, Vouchers

__all__ = [
    "CommunicationWays",
    "ContactAddresses",
    "Contacts",
    "CreditNotes",
    "DocumentFolders",
    "Documents",
    "Invoices",
    "Parts",
    "PaymentMethods",
    "SevUsers",
    "StaticCountries",
    "Tags",
    "Tools",
    "Unities",
    "VoucherPositions",
    "Vouchers",
]
