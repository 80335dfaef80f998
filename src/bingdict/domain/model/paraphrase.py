"""Paraphrase domain model."""

from dataclasses import dataclass

PRONUNCIATION_MARKERS = ("英", "美", "拼音")

PART_SEPARATOR = "，"
SENSE_SEPARATOR = "； "
SENSE_TERMINATOR = "；"


@dataclass(frozen=True)
class Paraphrase:
    """Translation of a word or phrase (Value Object).

    ``pronunciations`` and ``genders`` together hold every part of the
    description body, each in its original order.
    """

    query: str
    pronunciations: tuple[str, ...] = ()
    genders: tuple[str, ...] = ()

    @classmethod
    def parse(cls, query: str, body: str) -> "Paraphrase":
        """Split a description body into pronunciations and sense entries.

        Args:
            query: The word or phrase that was looked up.
            body: Description text with the boilerplate already removed.

        Returns:
            Paraphrase built from the body parts.
        """
        pronunciations: list[str] = []
        genders: list[str] = []

        for part in body.split(PART_SEPARATOR):
            if part.startswith(PRONUNCIATION_MARKERS):
                pronunciations.append(part)
            else:
                for gender in part.split(SENSE_SEPARATOR):
                    genders.append(gender.rstrip(SENSE_TERMINATOR))

        return cls(
            query=query,
            pronunciations=tuple(pronunciations),
            genders=tuple(genders),
        )

    def pronunciations_to_string(self) -> str:
        return PART_SEPARATOR.join(self.pronunciations)

    def genders_to_string(self) -> str:
        return "\n".join(self.genders)

    def __str__(self) -> str:
        pronunciations = ""
        if self.pronunciations:
            pronunciations = self.pronunciations_to_string() + "\n"
        return f"{self.query}\n{pronunciations}{self.genders_to_string()}"
