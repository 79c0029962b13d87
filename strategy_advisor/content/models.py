"""Document schemas for the content store.

Mirrors the CMS document types the site renders. Only Service feeds the
advisor; the rest are read by the content CLI and fallback rendering.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from strategy_advisor.agents.advisor_types import CatalogEntry


class Document(BaseModel):
    """Fields every CMS document carries."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(..., alias="_id", description="Document ID")
    title: Optional[str] = Field(None, description="Document title")


class Slug(BaseModel):
    current: str = ""


class Service(Document):
    """A service offering; the advisor's catalog is built from these"""
    title: str = Field(..., description="Service name")
    description: Optional[str] = Field(None, description="Short service description")
    icon: Optional[str] = Field(None, description="Emoji or icon name")
    image: Optional[Any] = Field(None, description="Image reference")
    slug: Optional[Slug] = None

    def to_catalog_entry(self) -> CatalogEntry:
        return CatalogEntry(id=self.id, title=self.title, description=self.description or "")


class HomePage(Document):
    subtitle: Optional[str] = None
    description: Optional[str] = None
    hero_image: Optional[Any] = Field(None, alias="heroImage")
    cta_text: Optional[str] = Field(None, alias="ctaText")
    cta_link: Optional[str] = Field(None, alias="ctaLink")


class AboutPage(Document):
    content: List[Any] = Field(default_factory=list, description="Portable text blocks")
    image: Optional[Any] = None


class ContactPage(Document):
    content: List[Any] = Field(default_factory=list, description="Portable text blocks")
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None


class NavigationItem(BaseModel):
    label: str = ""
    link: str = ""


class SiteSettings(Document):
    description: Optional[str] = None
    logo: Optional[Any] = None
    navigation: List[NavigationItem] = Field(default_factory=list)
