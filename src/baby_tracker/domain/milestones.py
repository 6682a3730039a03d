"""Default developmental milestones created for every new baby."""

from dataclasses import dataclass

from baby_tracker.domain.schemas import MilestoneCreate


@dataclass(frozen=True)
class MilestoneTemplate:
    """Static milestone definition."""

    name: str
    age_range: str
    description: str


DEFAULT_MILESTONES: tuple[MilestoneTemplate, ...] = (
    MilestoneTemplate(
        name="First Solids",
        age_range="4-6 months",
        description=(
            "Introduction of first solid foods like rice cereal or simple "
            "vegetable purees."
        ),
    ),
    MilestoneTemplate(
        name="Sitting Independently",
        age_range="5-7 months",
        description=(
            "Baby can sit in high chair for meals without support, improving "
            "feeding posture."
        ),
    ),
    MilestoneTemplate(
        name="Pincer Grasp",
        age_range="8-10 months",
        description=(
            "Development of fine motor skills allowing baby to pick up small "
            "pieces of food."
        ),
    ),
    MilestoneTemplate(
        name="Self-Feeding",
        age_range="9-12 months",
        description=(
            "Baby begins to use spoon or fork with assistance to feed themselves."
        ),
    ),
    MilestoneTemplate(
        name="Drinking from Cup",
        age_range="12-15 months",
        description=(
            "Transition from bottle to sippy cup or regular cup with assistance."
        ),
    ),
)


def default_milestones(baby_id: int) -> list[MilestoneCreate]:
    """Build the default milestone payloads for a baby."""
    return [
        MilestoneCreate(
            name=template.name,
            age_range=template.age_range,
            description=template.description,
            completed=False,
            completed_date=None,
            baby_id=baby_id,
        )
        for template in DEFAULT_MILESTONES
    ]
