"""Footer style generators."""

from datetime import datetime, timezone

from sitesmith.models.content import Contact, FooterInfo
from sitesmith.models.style import SectionKind
from sitesmith.templates.base import SectionProps, StyleSpec, style_registrar
from sitesmith.templates.common import escape, is_visible, optional, sanitize_url, text_or

FOOTER_STYLES: dict[str, StyleSpec] = {}
register = style_registrar(SectionKind.FOOTER, FOOTER_STYLES)

DEFAULT_BADGE = "Contact"
DEFAULT_HEADLINE = "Let's work together"
DEFAULT_DESCRIPTION = "Get in touch to discuss your next project. We'd love to hear from you."
COPYRIGHT_TEMPLATE = "© {year} {business_name}. All rights reserved."

_BASE_CSS = """<style>
.footer-refit-wrapper { width: 100%; padding: 6rem 1.5rem 2rem; }
.footer-refit { max-width: 80rem; margin: 0 auto; }
.footer-refit .footer-badge { display: inline-block; padding: 0.375rem 0.875rem; border-radius: 9999px; font-size: 0.75rem; text-transform: uppercase; letter-spacing: 0.12em; }
.footer-refit .footer-headline { font-size: clamp(2.5rem, 6vw, 5rem); line-height: 1; margin: 1.5rem 0 1rem; }
.footer-refit .footer-description { max-width: 32rem; font-size: 1.125rem; }
.footer-refit .contact-info { display: grid; gap: 1.25rem; list-style: none; margin: 0; padding: 0; }
.footer-refit .contact-label { display: block; font-size: 0.75rem; text-transform: uppercase; letter-spacing: 0.12em; }
.footer-refit .contact-value { text-decoration: none; }
.footer-refit .social-section { display: flex; align-items: center; gap: 1rem; margin-top: 3rem; padding-top: 2rem; border-top: 1px solid; }
.footer-refit .social-links { display: flex; gap: 0.75rem; }
.footer-refit .social-link { padding: 0.5rem 1rem; border-radius: 9999px; text-decoration: none; font-size: 0.875rem; }
.footer-refit .copyright { margin-top: 3rem; padding-top: 1.5rem; border-top: 1px solid; display: flex; justify-content: space-between; }
.footer-refit .copyright-text, .footer-refit .copyright-link { font-size: 0.75rem; text-decoration: none; }
</style>"""

_PANEL_CSS = """<style>
.footer-panel .footer-main { display: grid; grid-template-columns: 1.5fr 1fr; gap: 4rem; }
@media (max-width: 768px) { .footer-panel .footer-main { grid-template-columns: 1fr; } }
</style>"""

_COLUMNS_CSS = """<style>
.footer-columns .footer-main { display: grid; grid-template-columns: 2fr 1fr 1fr; gap: 3rem; }
.footer-columns .footer-headline { font-size: 1.75rem; }
.footer-columns .footer-nav { list-style: none; margin: 0; padding: 0; display: grid; gap: 0.75rem; }
.footer-columns .footer-nav a { color: inherit; text-decoration: none; }
@media (max-width: 768px) { .footer-columns .footer-main { grid-template-columns: 1fr; } }
</style>"""

_MINIMAL_CSS = """<style>
.footer-minimal { text-align: center; }
.footer-minimal .contact-info { justify-content: center; grid-auto-flow: column; gap: 2rem; }
.footer-minimal .social-section { justify-content: center; }
.footer-minimal .copyright { justify-content: center; }
</style>"""

_BAR_CSS = """<style>
.footer-bar { padding: 3rem 1.5rem; border-top: 1px solid #E3E6E3; }
.footer-bar .footer-refit { display: flex; align-items: center; justify-content: space-between; gap: 1.5rem; flex-wrap: wrap; }
.footer-bar .footer-brand { font-size: 1.125rem; font-weight: 700; letter-spacing: -0.02em; margin: 0; }
.footer-bar .footer-nav { display: flex; gap: 2rem; font-size: 0.875rem; }
.footer-bar .footer-nav a { color: inherit; text-decoration: none; }
.footer-bar .footer-year { font-size: 0.75rem; opacity: 0.6; }
@media (max-width: 768px) { .footer-bar .footer-refit { flex-direction: column; } }
</style>"""

_SPLIT_CSS = """<style>
.footer-split { padding: 0; }
.footer-split .footer-refit { max-width: none; display: grid; grid-template-columns: 1fr 1fr; }
.footer-split .footer-half { min-height: 25rem; padding: 6rem; display: flex; flex-direction: column; justify-content: space-between; }
.footer-split .footer-dark { background: #1F2933; color: #ffffff; }
.footer-split .footer-headline { font-size: 2.5rem; }
.footer-split .footer-est { font-family: monospace; font-size: 0.75rem; text-transform: uppercase; letter-spacing: 0.2em; opacity: 0.6; }
.footer-split .contact-info { grid-template-columns: 1fr 1fr; gap: 2rem; }
.footer-split .contact-label { color: #6B8F71; margin-bottom: 1rem; }
.footer-split .social-section { border-top: 0; padding-top: 0; }
@media (max-width: 768px) {
    .footer-split .footer-refit { grid-template-columns: 1fr; }
    .footer-split .footer-half { padding: 3rem; }
}
</style>"""


def _footer(props: SectionProps) -> FooterInfo:
    return props.content.footer or FooterInfo()


def _year(props: SectionProps) -> int:
    if props.year is not None:
        return props.year
    return datetime.now(timezone.utc).year


def _copyright(props: SectionProps) -> str:
    text = COPYRIGHT_TEMPLATE.format(year=_year(props), business_name=props.content.business_name)
    return (
        '<div class="copyright">'
        f'<p class="copyright-text font-manrope">{escape(text)}</p>'
        '<a href="#hero" class="copyright-link font-manrope">Back to top</a>'
        "</div>"
    )


def _badge(props: SectionProps) -> str:
    badge = text_or(_footer(props).badge, DEFAULT_BADGE)
    return optional(
        is_visible(props.visibility, "footer_badge"),
        f'<span class="footer-badge font-manrope">{escape(badge)}</span>',
    )


def _headline(props: SectionProps) -> str:
    headline = text_or(_footer(props).headline, DEFAULT_HEADLINE)
    return optional(
        is_visible(props.visibility, "footer_headline"),
        f'<h2 class="footer-headline font-dm-sans">{escape(headline)}</h2>',
    )


def _description(props: SectionProps) -> str:
    description = text_or(_footer(props).description, DEFAULT_DESCRIPTION)
    return optional(
        is_visible(props.visibility, "footer_description"),
        f'<p class="footer-description font-manrope">{escape(description)}</p>',
    )


def _contact(props: SectionProps) -> str:
    """Render contact rows for the non-empty contact fields."""
    if not is_visible(props.visibility, "footer_contact"):
        return ""
    contact = props.content.contact or Contact()
    rows = []
    if contact.email:
        rows.append(("Email", f"mailto:{contact.email}", contact.email))
    if contact.phone:
        rows.append(("Phone", f"tel:{contact.phone}", contact.phone))
    if contact.address:
        rows.append(("Address", None, contact.address))
    if not rows:
        return ""
    items = []
    for label, href, value in rows:
        if href:
            value_html = f'<a href="{sanitize_url(href)}" class="contact-value font-manrope">{escape(value)}</a>'
        else:
            value_html = f'<span class="contact-value font-manrope">{escape(value)}</span>'
        items.append(f'<li><span class="contact-label font-manrope">{label}</span>{value_html}</li>')
    return f'<ul class="contact-info">{"".join(items)}</ul>'


def _social(props: SectionProps) -> str:
    links = _footer(props).social_links
    if not links or not is_visible(props.visibility, "footer_social"):
        return ""
    items = "".join(
        f'<a href="{sanitize_url(link.url)}" class="social-link font-manrope" '
        f'target="_blank" rel="noopener">{escape(link.platform)}</a>'
        for link in links
    )
    return (
        '<div class="social-section">'
        '<span class="social-label font-manrope">Follow us</span>'
        f'<div class="social-links">{items}</div>'
        "</div>"
    )


@register("1", "Contact Panel", uses={"badge", "headline", "description", "contact", "social"})
def footer_style_1(props: SectionProps) -> str:
    """Big call to action beside contact details."""
    return f'''
    <footer class="footer-refit-wrapper footer-panel" id="contact">
        {_BASE_CSS}
        {_PANEL_CSS}
        <div class="footer-refit">
            <div class="footer-main">
                <div>
                    {_badge(props)}
                    {_headline(props)}
                    {_description(props)}
                </div>
                {_contact(props)}
            </div>
            {_social(props)}
            {_copyright(props)}
        </div>
    </footer>'''


@register("2", "Columns", uses={"headline", "description", "blurb", "contact", "social"})
def footer_style_2(props: SectionProps) -> str:
    """Corporate multi-column footer with site links."""
    footer = _footer(props)
    blurb = optional(
        bool(footer.brand_blurb),
        f'<p class="footer-blurb font-manrope">{escape(footer.brand_blurb)}</p>',
    )
    return f'''
    <footer class="footer-refit-wrapper footer-columns" id="contact">
        {_BASE_CSS}
        {_COLUMNS_CSS}
        <div class="footer-refit">
            <div class="footer-main">
                <div>
                    {_headline(props)}
                    {_description(props)}
                    {blurb}
                </div>
                <ul class="footer-nav font-manrope">
                    <li><a href="#hero">Home</a></li>
                    <li><a href="#about">About</a></li>
                    <li><a href="#services">Services</a></li>
                    <li><a href="#featured">Featured</a></li>
                </ul>
                {_contact(props)}
            </div>
            {_social(props)}
            {_copyright(props)}
        </div>
    </footer>'''


@register("3", "Minimal", uses={"headline", "contact", "social"})
def footer_style_3(props: SectionProps) -> str:
    """Centered name with a single contact line."""
    return f'''
    <footer class="footer-refit-wrapper footer-minimal" id="contact">
        {_BASE_CSS}
        {_MINIMAL_CSS}
        <div class="footer-refit">
            {_headline(props)}
            {_contact(props)}
            {_social(props)}
            {_copyright(props)}
        </div>
    </footer>'''


@register("4", "Minimal Bar", uses={"contact"})
def footer_style_4(props: SectionProps) -> str:
    """Single sparse row: name, site links and the year."""
    contact = props.content.contact or Contact()
    contact_link = optional(
        bool(contact.email) and is_visible(props.visibility, "footer_contact"),
        f'<a href="{sanitize_url("mailto:" + contact.email)}" class="contact-info">Contact</a>',
    )
    return f'''
    <footer class="footer-refit-wrapper footer-bar" id="contact">
        {_BASE_CSS}
        {_BAR_CSS}
        <div class="footer-refit">
            <h3 class="footer-brand font-dm-sans">{escape(props.content.business_name)}</h3>
            <nav class="footer-nav font-manrope">
                <a href="#about">About</a>
                <a href="#services">Services</a>
                {contact_link}
            </nav>
            <span class="footer-year font-manrope">&copy; {_year(props)}</span>
        </div>
    </footer>'''


@register("5", "Split", uses={"headline", "description", "contact", "social"})
def footer_style_5(props: SectionProps) -> str:
    """Light half with the sign-off, dark half with contact and social links."""
    return f'''
    <footer class="footer-refit-wrapper footer-split" id="contact">
        {_BASE_CSS}
        {_SPLIT_CSS}
        <div class="footer-refit">
            <div class="footer-half">
                <div>
                    {_headline(props)}
                    {_description(props)}
                </div>
                <p class="footer-est font-manrope">Est. {_year(props)}</p>
            </div>
            <div class="footer-half footer-dark">
                {_contact(props)}
                {_social(props)}
            </div>
        </div>
    </footer>'''
