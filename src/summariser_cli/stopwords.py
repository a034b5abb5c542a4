from __future__ import annotations
from typing import FrozenSet, Iterable

# English function words excluded from scoring. Tokens are lower-cased and
# stripped of apostrophes before lookup, so contractions appear in that form.
_ENGLISH = """
a about above after again against all also am an and any are arent as at
be because been before being below between both but by
can cannot cant could couldnt
did didnt do does doesnt doing dont down during
each either
few for from further
had hadnt has hasnt have havent having he hed her here heres hers herself
hes him himself his how hows
i im in into is isnt it its itself ive
just
lets
me more most mustnt my myself
no nor not now
of off on once only or other ought our ours ourselves out over own
same shant she shes should shouldnt so some such
than that thats the their theirs them themselves then there theres these they
theyd theyll theyre theyve this those through to too
under until up upon us
very
was wasnt we were werent weve what whats when whens where wheres which
while who whom whos why whys will with wont would wouldnt
you youd youll your youre yours yourself yourselves youve
"""

DEFAULT_STOPWORDS: FrozenSet[str] = frozenset(_ENGLISH.split())


def build_stopwords(extra: Iterable[str] = ()) -> FrozenSet[str]:
    """Default set plus ``extra`` words, lower-cased."""
    return DEFAULT_STOPWORDS | frozenset(w.strip().lower() for w in extra if w.strip())
