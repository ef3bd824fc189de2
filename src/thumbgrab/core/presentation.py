"""Pure projection of a result set onto what the window should show."""

from dataclasses import dataclass, field
from typing import List, Optional, Any

from .models import ProbeState, ResolutionTag, ResultSet


@dataclass
class CardModel:
    """Everything a thumbnail card needs to draw itself."""
    resolution: ResolutionTag
    label: str
    url: str
    filename: str
    state: ProbeState
    visible: bool
    broken: bool  # shown with an error marker instead of an image
    image: Optional[Any] = None


@dataclass
class RenderModel:
    show_results: bool
    video_id: Optional[str] = None
    generation: int = 0
    cards: List[CardModel] = field(default_factory=list)

    @property
    def visible_cards(self) -> List[CardModel]:
        return [c for c in self.cards if c.visible]


def project(result_set: Optional[ResultSet], translate=None) -> RenderModel:
    """Build the render model for a result set (None means nothing to show).

    Hidden candidates stay in the model with ``visible=False`` so a card can
    come back if a late load succeeds. The primary card is never hidden, a
    failed primary is drawn as broken.
    """
    if result_set is None:
        return RenderModel(show_results=False)

    cards = []
    for candidate in result_set.candidates:
        res = candidate.resolution
        label = translate(res.label_key) if translate else res.size_label
        cards.append(CardModel(
            resolution=res,
            label=label,
            url=candidate.url,
            filename=candidate.filename,
            state=candidate.state,
            visible=candidate.is_primary or not candidate.hidden,
            broken=candidate.state is ProbeState.FAILED,
            image=candidate.image,
        ))

    return RenderModel(
        show_results=True,
        video_id=result_set.video_id,
        generation=result_set.generation,
        cards=cards,
    )
