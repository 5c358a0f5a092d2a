import logging

from vitae.exceptions import PremiumTemplateError, SubscriptionLookupError
from vitae.models import CamelModel
from vitae.template_registry import can_use_template, get_template_by_id
from vitae.utils.supabase_client import get_supabase


class SubscriptionStatus(CamelModel):
    is_premium: bool = False
    plan: str = "free"
    status: str = "inactive"


def get_subscription_status(user_id: str | None) -> SubscriptionStatus:
    # Anonymous sessions are always on the free plan
    if not user_id:
        return SubscriptionStatus()

    try:
        response = (
            get_supabase().table("subscriptions")
            .select("plan, status")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
    except Exception as e:
        logging.error("Error checking subscription for %s: %s", user_id, e)
        raise SubscriptionLookupError(str(e)) from e

    if not response.data:
        return SubscriptionStatus()

    row = response.data[0]
    plan = row.get("plan") or "free"
    status = row.get("status") or "inactive"
    return SubscriptionStatus(
        is_premium=plan == "pro" and status == "active",
        plan=plan,
        status=status,
    )


def ensure_template_access(template_id: str, user_id: str | None = None):
    template = get_template_by_id(template_id)
    # Unknown ids render with default styling, so there is nothing to gate
    if template is None or not template.is_premium:
        return

    status = get_subscription_status(user_id)
    if not can_use_template(template, status.is_premium):
        logging.warning("Premium template %s requested without subscription (user %s)", template_id, user_id)
        raise PremiumTemplateError(template_id)
