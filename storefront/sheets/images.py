"""Resolve spreadsheet image filenames to served static paths"""

from typing import Optional

# Sheet filename -> uploaded file under /images/products
PRINT_IMAGES: dict[str, str] = {
    "1.jpg": "46049041_1851408448246881_91340420943970304_n.jpg",
    "2.jpg": "46157918_1851408464913546_5479694270384308224_n.jpg",
    "3.jpg": "46171502_1851408421580217_798453859348381696_n.jpg",
    "4.jpg": "46183924_1851408371580222_3627577524784988160_n.jpg",
    "5.jpg": "475777108_8867635843290738_8796161327523431186_n.jpg",
    "6.jpg": "475809357_8867635723290750_4545945436560665291_n.jpg",
    "7.jpg": "475844922_8867635873290735_5182707465057393519_n.jpg",
    "8.jpg": "475880434_8867635459957443_3220833299838462007_n.jpg",
    "9.jpg": "492004825_9368956366492014_878423927105912464_n.jpg",
    "10.jpg": "492077609_9370656769655307_3718851616967647908_n.jpg",
    "11.jpg": "496011660_9517738658280450_6532994532541587677_n.jpg",
}

# Sheet filename -> uploaded file under /images/limited-edition
LIMITED_EDITION_IMAGES: dict[str, str] = {
    "1.jpg": "516930260_9954350284619283_2642336253183266056_n.jpg",
    "2.jpg": "518352313_10046510578736586_7739042478145945783_n.jpg",
    "3.jpg": "518811770_10038702709517373_2363748120092957531_n.jpg",
    "4.jpg": "518284550_9985441824843462_4345875780933125577_n.jpg",
    "5.jpg": "519421729_10061326177255026_8645730988978430344_n.jpg",
    "6.jpg": "522127626_10068779516509692_8638792474902019974_n.jpg",
}

PLACEHOLDER_IMAGE = "/placeholder.svg"


class ImageResolver:
    """
    Maps a filename from the sheet to a served path.

    With a placeholder, unknown filenames resolve to the placeholder.
    Without one, unknown filenames are served under base_path as-is, and
    anything that already looks like a path is returned unchanged.
    """

    def __init__(
        self,
        base_path: str,
        lookup: dict[str, str],
        placeholder: Optional[str] = None,
    ):
        self.base_path = base_path.rstrip("/")
        self.lookup = lookup
        self.placeholder = placeholder

    def resolve(self, filename: str) -> str:
        """Get the served path for a sheet filename"""
        if self.placeholder is None and "/" in filename:
            return filename

        served_name = self.lookup.get(filename)
        if served_name is None:
            if self.placeholder is not None:
                return self.placeholder
            served_name = filename

        return f"{self.base_path}/{served_name}"


print_images = ImageResolver("/images/products", PRINT_IMAGES, placeholder=PLACEHOLDER_IMAGE)
limited_edition_images = ImageResolver("/images/limited-edition", LIMITED_EDITION_IMAGES)
