"""Built-in sample stalls shown before real submissions exist, with lookup helpers."""

from dataclasses import dataclass, field

from app.domain.enums import StallCategory


@dataclass(frozen=True)
class SampleItem:
    name: str
    price: str


@dataclass(frozen=True)
class SampleStall:
    """Static stall listing. instagram and items are optional."""

    id: str
    name: str
    slug: str
    category: StallCategory
    description: str
    banner_image: str
    images: tuple[str, ...]
    owner_name: str
    owner_phone: str
    instagram: str | None = None
    items: tuple[SampleItem, ...] = field(default_factory=tuple)

    def to_payload(self) -> dict:
        """Camel-cased display record, the same shape submissions carry."""
        payload: dict = {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "category": self.category.value,
            "description": self.description,
            "bannerImage": self.banner_image,
            "images": list(self.images),
            "ownerName": self.owner_name,
            "ownerPhone": self.owner_phone,
        }
        if self.instagram:
            payload["instagram"] = self.instagram
        if self.items:
            payload["items"] = [{"name": i.name, "price": i.price} for i in self.items]
        return payload


SAMPLE_STALLS: tuple[SampleStall, ...] = (
    # Food
    SampleStall(
        id="1",
        name="Spicy Bites",
        slug="spicy-bites",
        category=StallCategory.FOOD,
        description="The best spicy street food in town! Come try our famous pani puri and chaat.",
        banner_image="/images/food.png",
        images=("/images/food.png", "/images/food.png"),
        owner_name="Rajesh Kumar",
        owner_phone="+91 98765 43210",
        instagram="@spicybites_official",
        items=(
            SampleItem("Pani Puri", "₹50"),
            SampleItem("Samosa Chaat", "₹80"),
            SampleItem("Masala Dosa", "₹120"),
        ),
    ),
    SampleStall(
        id="2",
        name="Sweet Cravings",
        slug="sweet-cravings",
        category=StallCategory.FOOD,
        description="Delicious homemade sweets and desserts to satisfy your cravings.",
        banner_image="/images/food.png",
        images=("/images/food.png", "/images/food.png"),
        owner_name="Priya Singh",
        owner_phone="+91 91234 56789",
        items=(
            SampleItem("Gulab Jamun", "₹40"),
            SampleItem("Jalebi", "₹60"),
        ),
    ),
    # Accessories
    SampleStall(
        id="3",
        name="Sparkle & Shine",
        slug="sparkle-and-shine",
        category=StallCategory.ACCESSORIES,
        description="Handmade jewelry and accessories for every occasion.",
        banner_image="/images/accessories.png",
        images=("/images/accessories.png",),
        owner_name="Ananya Gupta",
        owner_phone="+91 99887 76655",
        instagram="@sparkle_shine_jewelry",
        items=(
            SampleItem("Beaded Necklace", "₹250"),
            SampleItem("Silver Earrings", "₹150"),
        ),
    ),
    # Games
    SampleStall(
        id="4",
        name="Target Practice",
        slug="target-practice",
        category=StallCategory.GAMES,
        description="Test your aim and win exciting prizes!",
        banner_image="/images/games.png",
        images=("/images/games.png",),
        owner_name="Vikram Malhotra",
        owner_phone="+91 88776 65544",
        items=(
            SampleItem("3 Shots", "₹50"),
            SampleItem("10 Shots", "₹150"),
        ),
    ),
)


def get_stalls_by_category(category: str) -> list[SampleStall]:
    """Sample stalls whose category equals category (lowercased)."""
    wanted = category.lower()
    return [s for s in SAMPLE_STALLS if s.category.value == wanted]


def get_stall_by_slug(slug: str) -> SampleStall | None:
    """First sample stall with this exact slug, or None."""
    return next((s for s in SAMPLE_STALLS if s.slug == slug), None)
