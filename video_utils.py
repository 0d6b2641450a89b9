import re
from typing import Optional

# watch?v=, youtu.be/, embed/, shorts/, v/, u/x/, &v= (m.youtube.com too)
YOUTUBE_ID_RE = re.compile(r"^.*(youtu.be/|v/|u/\w/|embed/|watch\?v=|&v=|shorts/)([^#&?]*).*")

EMBED_URL = "https://www.youtube-nocookie.com/embed/{video_id}?autoplay=0&rel=0&modestbranding=1"


def get_youtube_embed_url(url: Optional[str]) -> Optional[str]:
    """Privacy-enhanced embed url for a trailer link, or None if no 11-char id is found."""
    if not url:
        return None
    match = YOUTUBE_ID_RE.match(url.strip())
    if match and len(match.group(2)) == 11:
        return EMBED_URL.format(video_id=match.group(2))
    return None
