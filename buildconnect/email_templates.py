"""
MJML Email Templates
All email templates using MJML for responsive, cross-client compatibility
"""

from typing import Any

from .utils.sanitization import sanitize_string

THEME = {
    "primary": "#f97316",
    "background": "#f8fafc",
    "text_primary": "#0f172a",
    "text_secondary": "#334155",
    "text_muted": "#64748b",
    "border": "#e2e8f0",
}


def format_amount(value: Any) -> str:
    """Group thousands and drop trailing zeros, e.g. 12500.5 -> 12,500.5"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return sanitize_string(str(value)) if value is not None else ""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def get_base_template(title: str, preview_text: str, content_sections: str) -> str:
    """Base MJML template wrapper for all emails"""
    return f"""
    <mjml>
      <mj-head>
        <mj-title>{title}</mj-title>
        <mj-preview>{preview_text}</mj-preview>
        <mj-attributes>
          <mj-all font-family="-apple-system, BlinkMacSystemFont, 'Segoe UI', 'Helvetica Neue', Arial, sans-serif" />
          <mj-text font-size="16px" line-height="1.6" color="{THEME['text_secondary']}" />
        </mj-attributes>
      </mj-head>
      <mj-body background-color="{THEME['background']}">
        <mj-section background-color="#ffffff" padding="32px 40px 48px 40px">
          <mj-column>
            <mj-text font-size="24px" font-weight="600" color="{THEME['text_primary']}" line-height="1.3" padding="0 0 16px 0">
              {title}
            </mj-text>
            {content_sections}
          </mj-column>
        </mj-section>

        <mj-section padding="32px 20px">
          <mj-column>
            <mj-text align="center" font-size="13px" color="#94a3b8" padding="0">
              © BuildConnect. All rights reserved.
            </mj-text>
          </mj-column>
        </mj-section>
      </mj-body>
    </mjml>
    """


def _item_line(item: Any) -> str:
    if isinstance(item, dict):
        name, quantity = item.get("name", ""), item.get("quantity", "")
    else:
        name, quantity = item, ""
    return f"<li>{sanitize_string(str(name))} (Quantity: {sanitize_string(str(quantity))})</li>"


def booking_confirmation_template(
    items: list[Any],
    total_amount: Any,
    site_location: Any,
) -> str:
    """Booking confirmation MJML template"""
    items_list = "".join(_item_line(item) for item in items)

    site = site_location if isinstance(site_location, dict) else {}

    def _field(key: str) -> str:
        return sanitize_string(str(site.get(key, "")))

    content = f"""
    <mj-text>
      Thank you for your order with BuildConnect.
    </mj-text>

    <mj-text font-weight="600" color="{THEME['text_primary']}" padding="16px 0 0 0">
      Order Summary:
    </mj-text>
    <mj-text>
      <ul>{items_list}</ul>
    </mj-text>

    <mj-text font-weight="600" color="{THEME['text_primary']}">
      Total Amount: ₹{format_amount(total_amount)}
    </mj-text>

    <mj-divider border-color="{THEME['border']}" border-width="1px" padding="16px 0" />

    <mj-text>
      Your items will be delivered to:
    </mj-text>
    <mj-text color="{THEME['text_muted']}">
      {_field('address')},<br>{_field('area')},<br>{_field('city')} - {_field('pincode')}
    </mj-text>
    <mj-text>
      Contact No: {_field('contactNo')}
    </mj-text>
    """

    return get_base_template(
        title="Booking Confirmed!",
        preview_text="Your BuildConnect booking is confirmed",
        content_sections=content,
    )
