# =============================================================================
# agents/fallback_templates.py - Template Contracts
# =============================================================================
# Ready-made contracts used when the hosted model is unavailable (no API
# key, network error, bad response). Each vendor type gets its own
# template; anything else falls back to a generic service contract.
#
# Payment terms: 50% deposit on signing, balance due a fixed number of days
# before the event (30 for photography/generic, 14 for catering/floral).
#
# Usage:
#   from agents.fallback_templates import generate_fallback_content
#   text = generate_fallback_content(details)
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from core.models.ai import ContractDetails
from core.models.user import VendorType
from lib.formatting import format_currency, format_long_date, format_short_date

DEFAULT_DEPOSIT_PERCENTAGE = 0.5


@dataclass(frozen=True)
class ContractTemplate:
    """A fallback contract body plus its balance-due window."""
    body: str
    balance_due_days: int


PHOTOGRAPHY_TEMPLATE = ContractTemplate(balance_due_days=30, body="""WEDDING PHOTOGRAPHY CONTRACT

This Wedding Photography Contract ("Agreement") is made and entered into on {today} by and between {vendor_name} ("Photographer") and {client_name} ("Client").

PHOTOGRAPHY SERVICES
Photographer agrees to provide professional photography services for Client's wedding event on {event_date} at {event_venue} ("Event"). Photographer will capture a comprehensive set of digital images documenting the wedding ceremony, reception, and other key moments as mutually agreed upon.

PACKAGE DETAILS
The photography package includes:
{service_package}

PAYMENT TERMS
The total fee for the photography services is {amount}. A non-refundable retainer of 50% of the total ({deposit}) is due upon signing this Agreement. The remaining balance of {balance} is due {balance_due_days} days prior to the Event date.

CANCELLATION & RESCHEDULING
If Client needs to cancel or reschedule the Event, written notice must be provided to Photographer at least 90 days in advance. In the event of a cancellation, the retainer is non-refundable. Rescheduling is subject to Photographer's availability, and any date changes within 90 days of the Event may incur additional fees.

IMAGE DELIVERY
Photographer will deliver the final edited images to Client within 4-6 weeks following the Event. Images will be provided in high-resolution digital format via online gallery and USB drive.

COPYRIGHT & USAGE RIGHTS
Photographer retains the copyright to all images captured during the Event. Client is granted a non-exclusive license to use the delivered images for personal, non-commercial purposes, including printing, sharing on social media, and making digital copies. Any commercial use of the images requires written permission from Photographer.

BACKUP & CONTINGENCY
Photographer will bring backup camera equipment to the Event and will have contingency plans in place to ensure continuous coverage in the event of equipment failure or other unforeseen circumstances.

PROFESSIONAL CONDUCT
Photographer agrees to conduct themselves in a professional manner throughout the Event and to work collaboratively with Client and any other vendors or event staff. Client agrees to provide Photographer with reasonable access and cooperation to facilitate the photography services.

This Wedding Photography Contract constitutes the entire agreement between the parties and supersedes all prior negotiations, representations, or agreements relating to the subject matter herein.""")


CATERING_TEMPLATE = ContractTemplate(balance_due_days=14, body="""WEDDING CATERING CONTRACT

This Wedding Catering Contract ("Agreement") is made and entered into on {today} by and between {vendor_name} ("Caterer") and {client_name} ("Client").

CATERING SERVICES
Caterer agrees to provide professional catering services for Client's wedding event on {event_date} at {event_venue} ("Event"). Caterer will provide food preparation, service, and cleanup as specified in this agreement.

PACKAGE DETAILS
The catering package includes:
{service_package}

PAYMENT TERMS
The total fee for the catering services is {amount}. A non-refundable deposit of 50% of the total ({deposit}) is due upon signing this Agreement. The remaining balance of {balance} is due {balance_due_days} days prior to the Event date.

GUEST COUNT & FINAL DETAILS
Client must provide final guest count and any dietary restrictions no later than 7 days prior to the Event. Any increase in guest count after this deadline may result in additional charges.

CANCELLATION & RESCHEDULING
If Client needs to cancel or reschedule the Event, written notice must be provided to Caterer at least 30 days in advance. In the event of a cancellation, the deposit is non-refundable. Rescheduling is subject to Caterer's availability.

SERVICE & SETUP
Caterer will arrive at the venue at the agreed-upon time for setup and food preparation. Service staff will be provided as part of the package. Cleanup of catering areas and removal of catering equipment is included in the service.

VENUE REQUIREMENTS
Client is responsible for ensuring the venue has adequate kitchen facilities, electrical power, and water access as required for the catering service. Any additional equipment rental costs will be discussed in advance.

LIABILITY & INSURANCE
Caterer maintains appropriate liability insurance and food service permits. Client agrees to hold Caterer harmless from any claims arising from the consumption of food and beverages served at the Event.

This Wedding Catering Contract constitutes the entire agreement between the parties and supersedes all prior negotiations, representations, or agreements relating to the subject matter herein.""")


FLORAL_TEMPLATE = ContractTemplate(balance_due_days=14, body="""WEDDING FLORAL CONTRACT

This Wedding Floral Contract ("Agreement") is made and entered into on {today} by and between {vendor_name} ("Florist") and {client_name} ("Client").

FLORAL SERVICES
Florist agrees to provide professional floral design and delivery services for Client's wedding event on {event_date} at {event_venue} ("Event"). Services include design, preparation, delivery, and setup of floral arrangements as specified.

PACKAGE DETAILS
The floral package includes:
{service_package}

PAYMENT TERMS
The total fee for the floral services is {amount}. A non-refundable deposit of 50% of the total ({deposit}) is due upon signing this Agreement. The remaining balance of {balance} is due {balance_due_days} days prior to the Event date.

DESIGN CONSULTATION
Florist will work with Client to finalize floral designs, color schemes, and specific flower selections. Any changes to the original design after final approval may result in additional charges.

DELIVERY & SETUP
Florist will deliver and set up all floral arrangements at the venue on the day of the Event. Setup time will be coordinated with the venue and other vendors. Florist will also handle breakdown and removal of rental items if applicable.

FLOWER AVAILABILITY
Florist will make every effort to provide the specific flowers requested. However, due to seasonal availability and market conditions, substitutions of similar flowers may be necessary. Client will be notified of any major substitutions in advance.

CARE & LONGEVITY
Fresh flowers are perishable and their longevity depends on environmental conditions. Florist cannot guarantee the condition of flowers beyond the Event day, especially in extreme weather conditions.

CANCELLATION & CHANGES
If Client needs to cancel or make significant changes to the floral order, written notice must be provided at least 14 days in advance. Cancellations within 14 days of the Event may result in partial or full forfeiture of the deposit.

This Wedding Floral Contract constitutes the entire agreement between the parties and supersedes all prior negotiations, representations, or agreements relating to the subject matter herein.""")


GENERIC_TEMPLATE = ContractTemplate(balance_due_days=30, body="""WEDDING VENDOR SERVICE CONTRACT

This Service Contract ("Agreement") is made and entered into on {today} by and between {vendor_name} ("Vendor") and {client_name} ("Client").

SERVICES PROVIDED
Vendor agrees to provide professional services for Client's wedding event on {event_date} at {event_venue} ("Event").

PACKAGE DETAILS
The service package includes:
{service_package}

PAYMENT TERMS
The total fee for the services is {amount}. A deposit of 50% of the total ({deposit}) is due upon signing this Agreement. The remaining balance of {balance} is due {balance_due_days} days prior to the Event date.

CANCELLATION POLICY
If Client needs to cancel the Event, written notice must be provided to Vendor at least 30 days in advance. Cancellation fees may apply based on the timing of the cancellation notice.

PROFESSIONAL CONDUCT
Vendor agrees to provide services in a professional manner and to coordinate appropriately with other vendors and venue staff. Client agrees to provide reasonable access and cooperation to facilitate the services.

FORCE MAJEURE
Neither party shall be liable for any failure to perform due to circumstances beyond their reasonable control, including but not limited to acts of God, natural disasters, or government restrictions.

This Service Contract constitutes the entire agreement between the parties and supersedes all prior negotiations, representations, or agreements relating to the subject matter herein.""")


TEMPLATES: dict[VendorType, ContractTemplate] = {
    VendorType.PHOTOGRAPHER: PHOTOGRAPHY_TEMPLATE,
    VendorType.CATERER: CATERING_TEMPLATE,
    VendorType.FLORIST: FLORAL_TEMPLATE,
}


def get_template(vendor_type: VendorType | None) -> ContractTemplate:
    """Template for a vendor type, or the generic one."""
    return TEMPLATES.get(vendor_type, GENERIC_TEMPLATE)


def generate_fallback_content(details: ContractDetails, today: date | None = None) -> str:
    """
    Fill the vendor's template with the contract details.

    Args:
        details: Validated contract details
        today: Agreement date (defaults to the current date)

    Returns:
        Complete contract text with no placeholders left
    """
    template = get_template(details.vendor_type)
    deposit = details.amount * DEFAULT_DEPOSIT_PERCENTAGE
    balance = details.amount - deposit

    return template.body.format(
        today=format_short_date(today or date.today()),
        vendor_name=details.vendor_name.strip(),
        client_name=details.client_name.strip(),
        event_date=format_long_date(details.event_date),
        event_venue=details.event_venue.strip(),
        service_package=details.service_package.strip(),
        amount=format_currency(details.amount),
        deposit=format_currency(deposit),
        balance=format_currency(balance),
        balance_due_days=template.balance_due_days,
    )
