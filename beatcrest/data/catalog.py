"""In-memory beat catalog served by the API."""

from __future__ import annotations

from beatcrest.schemas.beat import Beat

_COVER_PARAMS = "?w=400&auto=format&fit=crop"
_COVER_STUDIO = "https://images.unsplash.com/photo-1511379938547-c1f69419868d" + _COVER_PARAMS
_COVER_CROWD = "https://images.unsplash.com/photo-1493225457124-a3eb161ffa5f" + _COVER_PARAMS
_COVER_KEYS = "https://images.unsplash.com/photo-1516280440614-37939bbacd81" + _COVER_PARAMS

MOCK_BEATS: tuple[Beat, ...] = (
    Beat(
        id=1,
        title="Street Hustle",
        producer="beatmaker_pro",
        producer_username="beatmaker_pro",
        producer_id=1,
        price=45000,
        genre="Hip Hop",
        bpm=95,
        key="D Minor",
        cover=_COVER_STUDIO,
        plays=1520,
        likes=234,
        downloads=45,
        date="2/1/2024",
        verified=True,
        description="Gritty street beat with dark melodies and punchy drums.",
        tags=["#dark", "#street"],
    ),
    Beat(
        id=2,
        title="Lagos Nights",
        producer="afrobeats_king",
        producer_username="afrobeats_king",
        producer_id=2,
        price=35000,
        genre="Afrobeats",
        bpm=108,
        key="G Major",
        cover=_COVER_CROWD,
        plays=3240,
        likes=567,
        downloads=89,
        date="2/5/2024",
        verified=True,
        description="Smooth Afrobeats with jazz influences and live instruments.",
        tags=["#afrobeats", "#jazz"],
    ),
    Beat(
        id=3,
        title="Melodic Dreams",
        producer="melody_master",
        producer_username="melody_master",
        producer_id=3,
        price=55000,
        genre="R&B",
        bpm=85,
        key="F Major",
        cover=_COVER_KEYS,
        plays=890,
        likes=123,
        downloads=23,
        date="2/10/2024",
        verified=True,
        description="Soulful R&B with smooth melodies and emotional depth.",
        tags=["#melodic", "#rnb"],
    ),
    Beat(
        id=4,
        title="Trap Nation",
        producer="trap_master",
        producer_username="trap_master",
        producer_id=4,
        price=40000,
        genre="Trap",
        bpm=140,
        key="F Major",
        cover=_COVER_STUDIO,
        plays=2100,
        likes=345,
        downloads=67,
        date="2/15/2024",
        verified=True,
        description="Hard-hitting trap beat with heavy 808s and crisp hi-hats.",
        tags=["#trap", "#hip-hop"],
    ),
    Beat(
        id=5,
        title="Midnight Groove",
        producer="DJ ProBeat",
        producer_username="DJ ProBeat",
        producer_id=5,
        price=45000,
        genre="Hip Hop",
        bpm=140,
        key="F Major",
        cover=_COVER_STUDIO,
        plays=1800,
        likes=289,
        downloads=52,
        date="2/20/2024",
        verified=False,
        description="Smooth hip hop beat perfect for late-night vibes.",
        tags=["#hip-hop", "#groove"],
    ),
)


def list_beats() -> list[Beat]:
    """Return every catalog beat in id order."""
    return list(MOCK_BEATS)


def find_beat(beat_id: int) -> Beat | None:
    """Return the beat with the given id, if any."""
    return next((beat for beat in MOCK_BEATS if beat.id == beat_id), None)
