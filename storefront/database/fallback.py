"""Static catalog data used when the sheets cannot be loaded"""

from ..models.product import Product
from ..sheets.images import print_images, limited_edition_images


def _gallery(*names: str) -> list[str]:
    return [print_images.resolve(name) for name in names]


PRINTS: list[Product] = [
    Product(
        id="1",
        name="Sunset Serenity Print",
        image=print_images.resolve("1.jpg"),
        description="Beautiful sunset landscape with silhouetted grass in warm tones.",
        price=280,
        full_description=(
            "A breathtaking sunset scene capturing the serene beauty of nature. The warm pink "
            "and orange hues create a peaceful atmosphere, with delicate grass silhouettes "
            "dancing in the foreground. This print brings tranquility and natural beauty to any space."
        ),
        gallery=_gallery("2.jpg", "2.jpg", "2.jpg"),
    ),
    Product(
        id="2",
        name="Golden Hour Wildlife",
        image=print_images.resolve("2.jpg"),
        description="Majestic deer silhouettes against a dramatic golden sunset.",
        price=350,
        full_description=(
            "A stunning wildlife photograph featuring deer silhouettes against a magnificent "
            "golden sunset. The dramatic lighting and composition create a powerful image that "
            "celebrates the beauty of wildlife in their natural habitat."
        ),
        gallery=_gallery("2.jpg", "3.jpg", "4.jpg"),
    ),
    Product(
        id="3",
        name="Bengal Tiger Portrait",
        image=print_images.resolve("3.jpg"),
        description="Powerful portrait of a Bengal Tiger in its natural habitat.",
        price=420,
        full_description=(
            "An intense and powerful portrait of a Bengal Tiger, capturing the raw beauty and "
            "strength of one of nature's most magnificent predators. This image showcases the "
            "tiger's piercing gaze and distinctive markings in incredible detail."
        ),
        gallery=_gallery("3.jpg", "4.jpg", "5.jpg"),
    ),
    Product(
        id="4",
        name="Humpback Whale Breach",
        image=print_images.resolve("4.jpg"),
        description="Spectacular moment of a humpback whale breaching the surface.",
        price=380,
        full_description=(
            "A breathtaking capture of a humpback whale breaching the ocean surface, "
            "demonstrating the incredible power and grace of these marine giants. This "
            "photograph was taken during a memorable encounter in pristine Antarctic waters."
        ),
        gallery=_gallery("4.jpg", "5.jpg", "6.jpg"),
    ),
    Product(
        id="5",
        name="Mountain Gorilla Family",
        image=print_images.resolve("5.jpg"),
        description="Intimate family portrait of mountain gorillas in Rwanda.",
        price=450,
        full_description=(
            "An intimate family portrait of mountain gorillas in their natural habitat in the "
            "Virunga Mountains of Rwanda. This photograph captures the gentle nature and "
            "complex social bonds of these endangered primates."
        ),
        gallery=_gallery("5.jpg", "6.jpg", "7.jpg"),
    ),
    Product(
        id="6",
        name="Leopard Close-Up",
        image=print_images.resolve("6.jpg"),
        description="Stunning close-up portrait of a leopard showing intricate details.",
        price=390,
        full_description=(
            "An extraordinary close-up portrait of a leopard, showcasing the incredible detail "
            "of their spotted coat and intense gaze. This image captures the wild beauty and "
            "mysterious nature of one of Africa's most elusive big cats."
        ),
        gallery=_gallery("6.jpg", "7.jpg", "8.jpg"),
    ),
    Product(
        id="7",
        name="Forest Antelope",
        image=print_images.resolve("7.jpg"),
        description="Graceful antelope in natural forest environment.",
        price=320,
        full_description=(
            "A beautiful capture of an antelope in its natural forest habitat. The image "
            "showcases the grace and elegance of these magnificent creatures, highlighting "
            "their natural beauty and the serene environment they call home."
        ),
        gallery=_gallery("7.jpg", "8.jpg", "9.jpg"),
    ),
    Product(
        id="8",
        name="Wildlife Conservation",
        image=print_images.resolve("8.jpg"),
        description="Powerful wildlife conservation message with stunning imagery.",
        price=300,
        full_description=(
            "A powerful image that combines stunning wildlife photography with an important "
            "conservation message. This piece serves as both beautiful art and a reminder of "
            "our responsibility to protect these magnificent creatures."
        ),
        gallery=_gallery("8.jpg", "9.jpg", "10.jpg"),
    ),
    Product(
        id="9",
        name="African Safari Scene",
        image=print_images.resolve("9.jpg"),
        description="Classic African safari landscape with wildlife.",
        price=360,
        full_description=(
            "A classic African safari scene capturing the essence of the wild. This image "
            "transports viewers to the heart of Africa, showcasing the natural beauty and "
            "wildlife that make this continent so special."
        ),
        gallery=_gallery("9.jpg", "10.jpg", "11.jpg"),
    ),
    Product(
        id="10",
        name="Wilderness Portrait",
        image=print_images.resolve("10.jpg"),
        description="Intimate wildlife portrait in natural wilderness setting.",
        price=340,
        full_description=(
            "An intimate wildlife portrait taken in a pristine wilderness setting. This image "
            "captures the essence of wild animals in their natural habitat, showcasing their "
            "beauty and the importance of wildlife conservation."
        ),
        gallery=_gallery("10.jpg", "11.jpg", "1.jpg"),
    ),
    Product(
        id="11",
        name="Nature's Majesty",
        image=print_images.resolve("11.jpg"),
        description="Majestic wildlife photograph celebrating nature's beauty.",
        price=400,
        full_description=(
            "A majestic wildlife photograph that celebrates the incredible beauty and diversity "
            "of nature. This image represents the culmination of patience, skill, and respect "
            "for wildlife, resulting in a truly spectacular capture."
        ),
        gallery=_gallery("11.jpg", "1.jpg", "2.jpg"),
    ),
]

LIMITED_EDITION: list[Product] = [
    Product(
        id="le-001",
        name="Black Deer",
        price=450,
        description="Limited edition black deer print",
        category="Wildlife",
        size="A3",
        image=limited_edition_images.resolve("1.jpg"),
    ),
    Product(
        id="le-002",
        name="Tiger Portrait",
        price=520,
        description="Majestic tiger limited edition print",
        category="Wildlife",
        size="A2",
        image=limited_edition_images.resolve("2.jpg"),
    ),
    Product(
        id="le-003",
        name="Bull Power",
        price=380,
        description="Powerful bull artwork",
        category="Animals",
        size="A3",
        image=limited_edition_images.resolve("3.jpg"),
    ),
    Product(
        id="le-004",
        name="Wildlife Scene",
        price=420,
        description="Beautiful wildlife photography",
        category="Wildlife",
        size="A3",
        image=limited_edition_images.resolve("4.jpg"),
    ),
    Product(
        id="le-005",
        name="Nature Study",
        price=350,
        description="Stunning nature composition",
        category="Wildlife",
        size="A4",
        image=limited_edition_images.resolve("5.jpg"),
    ),
    Product(
        id="le-006",
        name="Animal Portrait",
        price=480,
        description="Professional animal photography",
        category="Animals",
        size="A2",
        image=limited_edition_images.resolve("6.jpg"),
    ),
]


def load_prints() -> list[Product]:
    """Get a copy of the static print list"""
    return [product.model_copy(deep=True) for product in PRINTS]


def load_limited_edition() -> list[Product]:
    """Get a copy of the static limited-edition list"""
    return [product.model_copy(deep=True) for product in LIMITED_EDITION]
