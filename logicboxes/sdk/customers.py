"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
LogicBoxes SDK, a product of Garudex Labs

SDK Customer Operations.

Sign-up, search and lookup of customer accounts under the reseller.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from logicboxes.codec import JSONBool, JSONFloat, JSONTime, QueryRecord, query_field, wire_record
from logicboxes.codec.multimap import WireMultiMap
from logicboxes.core.records import Criteria, SearchResult
from logicboxes.logging_config import get_logger
from logicboxes.sdk.api import METHOD_GET, METHOD_POST, ApiCore

logger = get_logger(__name__)

NAMESPACE = "customers"


@wire_record
class SignUpForm(QueryRecord):
    """New customer account."""

    username: str = query_field("username", validate="required,email", default="")
    password: str = query_field("passwd", validate="required,min=9,max=16,rcpassword", default="")
    name: str = query_field("name", validate="required", default="")
    company: str = query_field("company", validate="required", default="")
    address: str = query_field("address-line-1", validate="required", default="")
    address_line2: str = query_field("address-line-2", omit_empty=True, validate="omitempty", default="")
    address_line3: str = query_field("address-line-3", omit_empty=True, validate="omitempty", default="")
    city: str = query_field("city", validate="required", default="")
    state: str = query_field("state", validate="required", default="")
    other_state: str = query_field("other-state", omit_empty=True, validate="omitempty", default="")
    country: str = query_field("country", validate="required,iso3166_1_alpha2", default="")
    zipcode: str = query_field("zipcode", validate="required", default="")
    language_code: str = query_field("lang-pref", validate="required", default="")
    phone_country_code: str = query_field("phone-cc", validate="required,len=2", default="")
    phone: str = query_field("phone", validate="required,number", default="")
    alt_phone_country_code: str = query_field("alt-phone-cc", omit_empty=True, validate="omitempty,len=2", default="")
    alt_phone: str = query_field("alt-phone", omit_empty=True, validate="omitempty,number", default="")
    fax_country_code: str = query_field("fax-cc", omit_empty=True, validate="omitempty,len=2", default="")
    fax: str = query_field("fax", omit_empty=True, validate="omitempty,number", default="")
    mobile_country_code: str = query_field("Mobile-cc", omit_empty=True, validate="omitempty,len=2", default="")
    mobile: str = query_field("Mobile", omit_empty=True, validate="omitempty,number", default="")
    vat_id: str = query_field("vat-id", omit_empty=True, validate="omitempty", default="")
    sms_consent: bool = query_field("sms-consent", omit_empty=True, validate="omitempty", default=False)
    email_marketing_consent: bool = query_field(
        "email-marketing-consent", omit_empty=True, validate="omitempty", default=False
    )
    accept_policy: bool = query_field("accept-policy", omit_empty=True, validate="omitempty", default=False)
    # Filled in from the sign-up response; never sent
    customer_id: str = query_field(validate="-", default="")


@wire_record
class CustomerCriteria(Criteria):
    """Customer search filters."""

    username: str = query_field("username", omit_empty=True, validate="omitempty", default="")
    name: str = query_field("name", omit_empty=True, validate="omitempty", default="")
    company: str = query_field("company", omit_empty=True, validate="omitempty", default="")
    city: str = query_field("city", omit_empty=True, validate="omitempty", default="")
    state: str = query_field("state", omit_empty=True, validate="omitempty", default="")
    receipt_lowest: float = query_field("total-receipt-start", omit_empty=True, validate="omitempty", default=0.0)
    receipt_highest: float = query_field("total-receipt-end", omit_empty=True, validate="omitempty", default=0.0)


class CustomerDetail(BaseModel):
    """Customer account as returned by the details endpoints."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field("", alias="customerid")
    username: str = ""
    reseller_id: str = Field("", alias="resellerid")
    parent_id: str = Field("", alias="parentid")
    name: str = ""
    company: str = ""
    email: str = Field("", alias="useremail")
    phone_country_code: str = Field("", alias="telnocc")
    phone: str = Field("", alias="telno")
    mobile_country_code: str = Field("", alias="mobilenocc")
    mobile: str = Field("", alias="mobileno")
    address: str = Field("", alias="address1")
    address_line2: str = Field("", alias="address2")
    address_line3: str = Field("", alias="address3")
    city: str = ""
    state: str = ""
    state_id: str = Field("", alias="stateid")
    country_code: str = Field("", alias="country")
    zipcode: str = Field("", alias="zip")
    pin: str = ""
    time_creation: Optional[JSONTime] = Field(None, alias="creationdt")
    status: str = Field("", alias="customerstatus")
    sales_contact_id: str = Field("", alias="salescontactid")
    language_preference: str = Field("", alias="langpref")
    total_receipts: Optional[JSONFloat] = Field(None, alias="totalreceipts")
    is_2fa: Optional[JSONBool] = Field(None, alias="twofactorauth_enabled")
    is_2fa_sms: Optional[JSONBool] = Field(None, alias="twofactorsmsauth_enabled")
    is_2fa_google: Optional[JSONBool] = Field(None, alias="twofactorgoogleauth_enabled")
    is_dominican_tax_configured: Optional[JSONBool] = Field(None, alias="isDominicanTaxConfiguredByParent")


def _scalar_text(body: Any) -> str:
    if isinstance(body, dict):
        for key in ("entityid", "customerid", "id"):
            if key in body:
                return str(body[key])
    return str(body).strip('"')


class CustomerOperations:
    """Customer account endpoints."""

    def __init__(self, core: ApiCore) -> None:
        self._core = core

    async def sign_up(self, form: SignUpForm) -> str:
        """
        Create a customer account.

        Returns:
            The new customer ID

        Raises:
            ValidationError: If the form is invalid; nothing is sent
            RemoteOperationError: If the API rejects the sign-up
        """
        params = form.url_values()
        body = await self._core.fetch(METHOD_POST, NAMESPACE, "v2/signup", params)
        customer_id = _scalar_text(body)
        logger.info("customer_signed_up", customer_id=customer_id)
        return customer_id

    async def search(
        self,
        criteria: Optional[CustomerCriteria] = None,
        records: int = 10,
        page: int = 1,
    ) -> SearchResult:
        """Search customers matching ``criteria``."""
        params = (criteria or CustomerCriteria()).url_values().copy()
        params.add("no-of-records", str(records))
        params.add("page-no", str(page))
        body = await self._core.fetch(METHOD_GET, NAMESPACE, "search", params)
        return SearchResult.from_body(body)

    async def get_by_id(self, customer_id: str) -> CustomerDetail:
        """Customer details by customer ID."""
        params = WireMultiMap([("customer-id", customer_id)])
        return await self._core.fetch_model(
            CustomerDetail, METHOD_GET, NAMESPACE, "details-by-id", params
        )

    async def get_by_username(self, username: str) -> CustomerDetail:
        """Customer details by username (email address)."""
        params = WireMultiMap([("username", username)])
        return await self._core.fetch_model(
            CustomerDetail, METHOD_GET, NAMESPACE, "details", params
        )
