"""Project case studies and legal documents shown in the page's modals."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field

from folioctl.domain.types import ProjectCategory

ALL_CATEGORIES = "all"


class Project(BaseModel):
    """A portfolio case study."""

    model_config = {"frozen": True}

    key: str
    title: str
    category: ProjectCategory
    meta: str
    description: str
    challenge: str
    solution: str
    results: list[str] = Field(default_factory=list)
    stack: list[str] = Field(default_factory=list)


class LegalSection(BaseModel):
    model_config = {"frozen": True}

    heading: str
    body: str = ""
    items: list[str] = Field(default_factory=list)


class LegalDocument(BaseModel):
    model_config = {"frozen": True}

    key: str
    title: str
    updated: str
    sections: list[LegalSection] = Field(default_factory=list)


PROJECTS: tuple[Project, ...] = (
    Project(
        key="teal-dashboard",
        title="Teal Dashboard UI",
        category=ProjectCategory.DESIGN,
        meta="Product design • UI • 2024",
        description=(
            "A data-heavy dashboard redesigned for clarity and ease of use, using a "
            "modular card-based layout and teal accents to guide attention."
        ),
        challenge=(
            "The client needed a data-heavy dashboard that felt lightweight and "
            "approachable, avoiding the typical dense analytics interface."
        ),
        solution=(
            "A modular card-based layout with generous whitespace, clear hierarchy, and "
            "simplified charts with expandable details for power users."
        ),
        results=[
            "User task completion time reduced by 32%",
            "Support tickets decreased by 22%",
            "Stakeholder adoption increased within 2 weeks",
            "Positive feedback on clarity and ease of use",
        ],
        stack=["Figma", "Principle", "HTML", "CSS", "JavaScript", "Chart.js"],
    ),
    Project(
        key="minimal-portfolio",
        title="Minimal Portfolio Site",
        category=ProjectCategory.WEB,
        meta="Frontend • Performance • 2024",
        description=(
            "A lightning-fast, minimalist portfolio site optimized for performance and "
            "accessibility, with Lighthouse scores consistently above 95."
        ),
        challenge=(
            "A creative professional wanted a portfolio that loaded instantly, worked on "
            "all devices, and stayed out of the way of their work."
        ),
        solution=(
            "A static single-page layout with optimized images, minimal JavaScript, "
            "semantic HTML and CSS Grid for responsiveness."
        ),
        results=[
            "Page load under 1.2s on 3G",
            "Lighthouse performance score 98",
            "Zero layout shifts (CLS 0)",
            "Client reported increased inquiry rate",
        ],
        stack=["HTML", "CSS", "Vanilla JS", "WebP", "Netlify"],
    ),
    Project(
        key="coral-brand-kit",
        title="Coral Brand Kit",
        category=ProjectCategory.BRANDING,
        meta="Branding • Identity • 2023",
        description=(
            "A complete brand identity system centered around coral, including logo "
            "variations, typography, color system, and component library."
        ),
        challenge=(
            "A startup needed a cohesive visual identity that felt modern yet warm, with "
            "coral as the signature color."
        ),
        solution=(
            "A full brand system: logo variations, typography palette, color system, "
            "illustration style, and component library with usage guidelines."
        ),
        results=[
            "Brand recognition improved in user surveys",
            "Consistent visual language across all touchpoints",
            "Easy onboarding for new designers",
            "Positive feedback from stakeholders",
        ],
        stack=["Illustrator", "Figma", "After Effects", "Style Guide"],
    ),
    Project(
        key="mobile-app-screens",
        title="Mobile App Screens",
        category=ProjectCategory.DESIGN,
        meta="UX • UI • 2023",
        description=(
            "Clean, motivating mobile app onboarding and core flows designed to reduce "
            "first-use drop-off and improve retention."
        ),
        challenge=(
            "A fitness app needed onboarding and core flows that felt motivating and "
            "simple, reducing drop-off during first use."
        ),
        solution=(
            "Illustrated step-by-step onboarding screens with clear calls to action, "
            "refined over two rounds of usability testing."
        ),
        results=[
            "Onboarding completion increased by 28%",
            "Day-1 retention improved by 15%",
            "Reduced support questions about getting started",
            "App store ratings improved",
        ],
        stack=["Figma", "Principle", "User Testing", "Prototyping"],
    ),
    Project(
        key="landing-page-system",
        title="Landing Page System",
        category=ProjectCategory.WEB,
        meta="Web • Design system • 2023",
        description=(
            "A component-based landing page system enabling the marketing team to launch "
            "dozens of pages quickly while keeping brand consistency and performance."
        ),
        challenge=(
            "A marketing team needed to launch dozens of landing pages quickly while "
            "maintaining brand consistency and performance."
        ),
        solution=(
            "Reusable hero, feature, testimonial and CTA sections wired to a CMS for "
            "non-technical users, optimized for SEO and speed."
        ),
        results=[
            "Page creation time reduced from days to hours",
            "SEO scores consistently above 90",
            "Conversion rates improved across variants",
            "Design consistency maintained",
        ],
        stack=["HTML", "CSS", "JavaScript", "React", "Contentful", "Vercel"],
    ),
    Project(
        key="logo-refresh",
        title="Logo Refresh",
        category=ProjectCategory.BRANDING,
        meta="Brand • Visual • 2022",
        description=(
            "A modern logo evolution that retained brand recognition while improving "
            "scalability and perception across digital and print."
        ),
        challenge=(
            "An established company wanted to modernize their logo without losing brand "
            "recognition or alienating existing customers."
        ),
        solution=(
            "A brand audit and stakeholder interviews, then cleaner geometry, updated "
            "typography, and a flexible lockup system with transition assets."
        ),
        results=[
            "Positive feedback from 85% of surveyed customers",
            "Improved scalability across digital and print",
            "Clearer brand perception in focus groups",
            "Smooth internal adoption",
        ],
        stack=["Illustrator", "Brand Audit", "Guidelines"],
    ),
)

LEGAL_DOCUMENTS: dict[str, LegalDocument] = {
    "privacy": LegalDocument(
        key="privacy",
        title="Privacy Policy",
        updated="2026-01-28",
        sections=[
            LegalSection(
                heading="Information I Collect",
                items=[
                    "Contact information you provide via the contact form "
                    "(name, email address, subject, message).",
                    "Usage data collected by the web server (IP address, browser type, "
                    "access times, pages visited).",
                ],
            ),
            LegalSection(
                heading="How I Use Your Information",
                items=[
                    "Respond to your inquiries.",
                    "Improve the site and user experience.",
                    "Comply with legal obligations.",
                ],
            ),
            LegalSection(
                heading="Data Sharing",
                body=(
                    "Personal information is never sold. It is shared only with service "
                    "providers that operate the site (hosting, email delivery) or when "
                    "required by law."
                ),
            ),
            LegalSection(
                heading="Your Rights",
                items=[
                    "Access, update, or delete your personal information.",
                    "Opt out of communications.",
                    "Request a copy of the information held about you.",
                ],
            ),
        ],
    ),
    "terms": LegalDocument(
        key="terms",
        title="Terms of Service",
        updated="2026-01-28",
        sections=[
            LegalSection(
                heading="Use License",
                body=(
                    "Materials on the site may be viewed for personal, non-commercial use. "
                    "You may not modify or copy them, use them commercially, or remove "
                    "proprietary notices."
                ),
            ),
            LegalSection(
                heading="Disclaimer",
                body="The materials on the site are provided on an 'as is' basis.",
            ),
            LegalSection(
                heading="User Responsibilities",
                items=[
                    "Do not use the site for any unlawful purpose.",
                    "Do not impersonate any person or entity.",
                    "Do not transmit malicious code.",
                    "Do not interfere with the site or its servers.",
                ],
            ),
        ],
    ),
}


def get_project(key: str) -> Project | None:
    for project in PROJECTS:
        if project.key == key:
            return project
    return None


def get_legal_document(key: str) -> LegalDocument | None:
    return LEGAL_DOCUMENTS.get(key)


def filter_projects(projects: Iterable[Project], category: str | None) -> list[Project]:
    """Apply a filter button: ``all`` (or nothing) keeps everything."""
    if not category or category.lower() == ALL_CATEGORIES:
        return list(projects)
    return [p for p in projects if p.category.value.lower() == category.lower()]
