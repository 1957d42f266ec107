"""Payload types mirroring sevDesk API responses.

Nothing here is validated at runtime: responses are decoded JSON handed back
as-is, and these types only document the shape the API promises.
"""

from __future__ import annotations

from typing import Any, Generic, NotRequired, TypedDict, TypeVar, Union

# Decoded JSON of unknown shape.
JSONValue = Union[None, bool, int, float, str, list["JSONValue"], dict[str, "JSONValue"]]

T = TypeVar("T")


class ObjectRef(TypedDict):
    """Reference to another sevDesk object, e.g. ``{"id": 1, "objectName": "Contact"}``."""

    id: int | str
    objectName: str


class ListResponse(TypedDict, Generic[T]):
    """Collection envelope: ``total`` is only sent with ``countAll=true``."""

    objects: list[T]
    total: NotRequired[int]


class ObjectResponse(TypedDict, Generic[T]):
    objects: T


class RateLimitBody(TypedDict):
    """JSON body sevDesk returns with a 429 security block."""

    code: str
    contact: str
    reason: str
    recommendation: str


class _Model(TypedDict, total=False):
    id: str
    objectName: str
    create: str
    update: str
    sevClient: ObjectRef


class Invoice(_Model, total=False):
    invoiceNumber: str
    contact: ObjectRef
    contactPerson: ObjectRef
    invoiceDate: str
    header: str
    headText: str
    footText: str
    timeToPay: int | str
    discount: int | str
    address: str
    addressCountry: ObjectRef
    deliveryDate: str
    status: str
    taxRate: float | str
    taxText: str
    taxType: str
    paymentMethod: ObjectRef
    sendDate: str
    invoiceType: str
    currency: str
    showNet: str
    sendType: str
    origin: ObjectRef | None
    sumNet: str
    sumGross: str
    sumTax: str


class InvoicePos(_Model, total=False):
    invoice: ObjectRef
    part: ObjectRef
    quantity: float | str
    price: float | str
    name: str
    unity: ObjectRef
    positionNumber: int | str
    text: str
    discount: float | str
    taxRate: float | str
    priceGross: float | str
    priceTax: float | str


class CreditNote(_Model, total=False):
    creditNoteNumber: str
    contact: ObjectRef
    contactPerson: ObjectRef
    creditNoteDate: str
    header: str
    headText: str
    footText: str
    address: str
    addressCountry: ObjectRef
    status: str
    taxRate: float | str
    taxText: str
    taxType: str
    sendDate: str
    currency: str
    sendType: str
    sumNet: str
    sumGross: str


class CreditNotePos(_Model, total=False):
    creditNote: ObjectRef
    quantity: float | str
    price: float | str
    name: str
    unity: ObjectRef
    positionNumber: int | str
    text: str
    taxRate: float | str


class Voucher(_Model, total=False):
    voucherDate: str
    supplier: ObjectRef
    supplierName: str
    description: str
    document: ObjectRef
    status: str
    sumNet: str
    sumGross: str
    taxType: str
    creditDebit: str
    voucherType: str
    currency: str


class VoucherPos(_Model, total=False):
    voucher: ObjectRef
    accountingType: ObjectRef
    taxRate: float | str
    net: bool | str
    sumNet: str
    sumGross: str
    comment: str


class DocumentFolder(_Model, total=False):
    name: str
    parent: ObjectRef | None


class Document(_Model, total=False):
    filename: str
    folder: ObjectRef
    object: ObjectRef | None
    extension: str
    filesize: str
    mimeType: str
    description: str
    status: str


class Contact(_Model, total=False):
    name: str
    surename: str
    familyname: str
    customerNumber: str
    parent: ObjectRef | None
    category: ObjectRef
    description: str
    vatNumber: str
    taxNumber: str
    status: str


class ContactAddress(_Model, total=False):
    contact: ObjectRef
    street: str
    zip: str
    city: str
    country: ObjectRef
    category: ObjectRef
    name: str


class CommunicationWay(_Model, total=False):
    contact: ObjectRef
    type: str
    value: str
    key: ObjectRef
    main: bool | str


class Unity(_Model, total=False):
    name: str
    translationCode: str
    unityNumber: str


class PaymentMethod(_Model, total=False):
    name: str
    text: str


class Tag(_Model, total=False):
    name: str


class TagRelation(_Model, total=False):
    tag: ObjectRef
    object: ObjectRef


class SevUser(_Model, total=False):
    username: str
    fullname: str
    email: str


class StaticCountry(_Model, total=False):
    code: str
    name: str
    nameEn: str
    translationCode: str
    locale: str


class Part(_Model, total=False):
    name: str
    partNumber: str
    text: str
    category: ObjectRef
    stock: float | str
    unity: ObjectRef
    price: float | str
    priceNet: float | str
    priceGross: float | str
    taxRate: float | str
    status: str


class BookkeepingSystemVersion(TypedDict, total=False):
    version: str


class SavedInvoice(TypedDict):
    invoice: Invoice
    invoicePos: list[InvoicePos]
    filename: str


class SavedCreditNote(TypedDict):
    creditNote: CreditNote
    creditNotePos: list[CreditNotePos]


# Loose query mapping accepted by list/get methods: limit, offset, embed, countAll, ...
Query = dict[str, Any]
