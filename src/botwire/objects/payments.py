from __future__ import annotations

from typing import TypeAlias

from ..ids import FileId, FileUniqueId, UnixTimestamp
from ..variants import variant_family
from .base import TelegramObject


class LabeledPrice(TelegramObject):
    label: str
    amount: int


class Invoice(TelegramObject):
    title: str
    description: str
    start_parameter: str
    currency: str
    total_amount: int


class ShippingAddress(TelegramObject):
    country_code: str
    state: str
    city: str
    street_line1: str
    street_line2: str
    post_code: str


class OrderInfo(TelegramObject):
    name: str | None = None
    phone_number: str | None = None
    email: str | None = None
    shipping_address: ShippingAddress | None = None


class ShippingOption(TelegramObject):
    id: str
    title: str
    prices: list[LabeledPrice]


class SuccessfulPayment(TelegramObject):
    currency: str
    total_amount: int
    invoice_payload: str
    telegram_payment_charge_id: str
    provider_payment_charge_id: str
    shipping_option_id: str | None = None
    order_info: OrderInfo | None = None


class PassportFile(TelegramObject):
    file_id: FileId
    file_unique_id: FileUniqueId
    file_size: int
    file_date: UnixTimestamp


class EncryptedPassportElement(TelegramObject):
    type: str
    hash: str
    data: str | None = None
    phone_number: str | None = None
    email: str | None = None
    files: list[PassportFile] | None = None
    front_side: PassportFile | None = None
    reverse_side: PassportFile | None = None
    selfie: PassportFile | None = None
    translation: list[PassportFile] | None = None


class EncryptedCredentials(TelegramObject):
    data: str
    hash: str
    secret: str


class PassportData(TelegramObject):
    data: list[EncryptedPassportElement]
    credentials: EncryptedCredentials


# Errors reported back for Telegram Passport elements, discriminated by `source`.


class _PassportElementError(TelegramObject, tag_field="source"):
    @property
    def source(self) -> str:
        return self.__struct_config__.tag


class PassportElementErrorDataField(_PassportElementError, tag="data"):
    type: str
    field_name: str
    data_hash: str
    message: str


class PassportElementErrorFrontSide(_PassportElementError, tag="front_side"):
    type: str
    file_hash: str
    message: str


class PassportElementErrorReverseSide(_PassportElementError, tag="reverse_side"):
    type: str
    file_hash: str
    message: str


class PassportElementErrorSelfie(_PassportElementError, tag="selfie"):
    type: str
    file_hash: str
    message: str


class PassportElementErrorFile(_PassportElementError, tag="file"):
    type: str
    file_hash: str
    message: str


class PassportElementErrorFiles(_PassportElementError, tag="files"):
    type: str
    file_hashes: list[str]
    message: str


class PassportElementErrorTranslationFile(
    _PassportElementError, tag="translation_file"
):
    type: str
    file_hash: str
    message: str


class PassportElementErrorTranslationFiles(
    _PassportElementError, tag="translation_files"
):
    type: str
    file_hashes: list[str]
    message: str


class PassportElementErrorUnspecified(_PassportElementError, tag="unspecified"):
    type: str
    element_hash: str
    message: str


PassportElementError: TypeAlias = (
    PassportElementErrorDataField
    | PassportElementErrorFrontSide
    | PassportElementErrorReverseSide
    | PassportElementErrorSelfie
    | PassportElementErrorFile
    | PassportElementErrorFiles
    | PassportElementErrorTranslationFile
    | PassportElementErrorTranslationFiles
    | PassportElementErrorUnspecified
)

PASSPORT_ELEMENT_ERROR = variant_family("PassportElementError", PassportElementError)


__all__ = [
    "PASSPORT_ELEMENT_ERROR",
    "EncryptedCredentials",
    "EncryptedPassportElement",
    "Invoice",
    "LabeledPrice",
    "OrderInfo",
    "PassportData",
    "PassportElementError",
    "PassportElementErrorDataField",
    "PassportElementErrorFile",
    "PassportElementErrorFiles",
    "PassportElementErrorFrontSide",
    "PassportElementErrorReverseSide",
    "PassportElementErrorSelfie",
    "PassportElementErrorTranslationFile",
    "PassportElementErrorTranslationFiles",
    "PassportElementErrorUnspecified",
    "PassportFile",
    "ShippingAddress",
    "ShippingOption",
    "SuccessfulPayment",
]
