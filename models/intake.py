"""
Intake data model

One normalized business-intake submission. Every field is a string,
empty when the submitter left it out.
"""
from dataclasses import dataclass, asdict, fields
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class Intake:
    """Canonical intake record (immutable once built)"""
    # Contact
    full_name: str = ""
    business_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    website_url: str = ""

    # Business
    business_desc: str = ""
    products_services: str = ""
    target_audience: str = ""
    usp: str = ""
    preferred_colors: str = ""
    style_theme: str = ""
    tagline: str = ""
    slogan: str = ""
    reviews: str = ""

    # Reference videos
    video1_desc: str = ""
    video1_link: str = ""
    video2_desc: str = ""
    video2_link: str = ""
    video3_desc: str = ""
    video3_link: str = ""

    # Social
    link_fb: str = ""
    link_ig: str = ""
    link_tt: str = ""
    link_li: str = ""
    link_yt: str = ""
    link_gbp: str = ""
    other_social_url1: str = ""
    other_social_url2: str = ""

    # SEO
    seo_keywords: str = ""
    seo_meta_desc: str = ""
    contact_keywords: str = ""

    @classmethod
    def field_names(cls) -> List[str]:
        """Names of every intake field, in declaration order"""
        return [f.name for f in fields(cls)]

    def to_dict(self) -> Dict[str, str]:
        """Convert intake to a plain dictionary"""
        return asdict(self)

    def reference_videos(self) -> List[Tuple[str, str]]:
        """Non-empty (description, link) pairs from the three video slots"""
        pairs = [
            (self.video1_desc, self.video1_link),
            (self.video2_desc, self.video2_link),
            (self.video3_desc, self.video3_link),
        ]
        return [(desc, link) for desc, link in pairs if desc or link]

    def social_links(self) -> Dict[str, str]:
        """Social profile label -> URL, skipping blanks"""
        links = {
            "Facebook": self.link_fb,
            "Instagram": self.link_ig,
            "TikTok": self.link_tt,
            "LinkedIn": self.link_li,
            "YouTube": self.link_yt,
            "Google Business Profile": self.link_gbp,
            "Other": self.other_social_url1,
            "Other (2)": self.other_social_url2,
        }
        return {label: url for label, url in links.items() if url}
