""" Read access to DEP-3 patch headers

DEP-3 (https://dep-team.pages.debian.net/deps/dep3/) defines the deb822
style header at the top of patches in debian/patches.  Some fields have
aliases: "Subject" for "Description" and "From" for "Author".

>>> header = PatchHeader.from_text('''\\
... Description: Fix the frobnicator
...  It used to crash on empty input.
... Forwarded: not-needed
... Bug-Debian: https://bugs.debian.org/12345
... ''')
>>> header.description
'Fix the frobnicator'
>>> header.long_description
'It used to crash on empty input.'
>>> header.forwarded.state
<ForwardedState.NOT_NEEDED: 'not-needed'>
>>> list(header.bugs)
[('Debian', 'https://bugs.debian.org/12345')]
"""

import collections
import datetime
import enum
import logging

from typing import Iterator, List, Optional, Tuple

from deb822_lossy._lossy import Deb822Paragraph, parse_deb822_text

logger = logging.getLogger(__name__)

_COMMIT_PREFIX = 'commit:'


class ForwardedState(enum.Enum):
    NO = 'no'
    NOT_NEEDED = 'not-needed'
    YES = 'yes'


# location is the URL (or other reference) of the forwarded patch when
# state is ForwardedState.YES and None otherwise.
Forwarded = collections.namedtuple('Forwarded', ['state', 'location'])


class OriginCategory(enum.Enum):
    """The optional category at the start of an Origin field"""

    # an upstream patch that had to be modified to apply on the current version
    BACKPORT = 'backport'
    # a patch created by Debian or another distribution vendor
    VENDOR = 'vendor'
    # a patch cherry-picked from the upstream VCS
    UPSTREAM = 'upstream'
    OTHER = 'other'


# is_commit is True for values of the form "commit:<id>", in which case value
# is the commit id without the prefix.
Origin = collections.namedtuple('Origin', ['value', 'is_commit'])
AppliedUpstream = collections.namedtuple('AppliedUpstream', ['value', 'is_commit'])


def _split_commit(text):
    # type: (str) -> Tuple[str, bool]
    if text.startswith(_COMMIT_PREFIX):
        return text[len(_COMMIT_PREFIX):], True
    return text, False


def parse_origin(text):
    # type: (str) -> Tuple[Optional[OriginCategory], Origin]
    """Split an Origin field into its category (if any) and its value

    >>> parse_origin("upstream, commit:1234abcd")
    (<OriginCategory.UPSTREAM: 'upstream'>, Origin(value='1234abcd', is_commit=True))
    >>> parse_origin("https://example.com/fix.patch")
    (None, Origin(value='https://example.com/fix.patch', is_commit=False))
    """
    category = None  # type: Optional[OriginCategory]
    head, _, rest = text.partition(', ')
    try:
        category = OriginCategory(head)
    except ValueError:
        rest = text
    return category, Origin(*_split_commit(rest))


def parse_forwarded(text):
    # type: (str) -> Forwarded
    if text == ForwardedState.NO.value:
        return Forwarded(ForwardedState.NO, None)
    if text == ForwardedState.NOT_NEEDED.value:
        return Forwarded(ForwardedState.NOT_NEEDED, None)
    return Forwarded(ForwardedState.YES, text)


class PatchHeader:
    """The DEP-3 header of a patch"""

    __slots__ = ('paragraph',)

    def __init__(self, paragraph=None):
        # type: (Optional[Deb822Paragraph]) -> None
        self.paragraph = paragraph if paragraph is not None else Deb822Paragraph()

    @classmethod
    def from_text(cls, text):
        # type: (str) -> PatchHeader
        """Parse a patch header

        Only the first paragraph is used.  DEP-3 allows a second
        "pseudo-header" paragraph, but it is not merged into the first one.

        :raises Deb822ParseError: The header is not a valid deb822 paragraph.
        """
        document = parse_deb822_text(text)
        if document.is_empty():
            return cls()
        return cls(document[0])

    def __repr__(self):
        # type: () -> str
        return "{clsname}({paragraph!r})".format(clsname=self.__class__.__name__,
                                                 paragraph=self.paragraph,
                                                 )

    @property
    def origin(self):
        # type: () -> Optional[Tuple[Optional[OriginCategory], Origin]]
        value = self.paragraph.get('Origin')
        if value is None:
            return None
        return parse_origin(value)

    @property
    def forwarded(self):
        # type: () -> Optional[Forwarded]
        value = self.paragraph.get('Forwarded')
        if value is None:
            return None
        return parse_forwarded(value)

    @property
    def author(self):
        # type: () -> Optional[str]
        return self.paragraph.get('Author', self.paragraph.get('From'))

    @property
    def reviewed_by(self):
        # type: () -> List[str]
        return self.paragraph.get_all('Reviewed-By')

    @property
    def last_update(self):
        # type: () -> Optional[datetime.date]
        value = self.paragraph.get('Last-Update')
        if value is None:
            return None
        try:
            return datetime.datetime.strptime(value.strip(), '%Y-%m-%d').date()
        except ValueError:
            logger.debug('Ignoring malformed Last-Update "%s"', value)
            return None

    @property
    def applied_upstream(self):
        # type: () -> Optional[AppliedUpstream]
        value = self.paragraph.get('Applied-Upstream')
        if value is None:
            return None
        return AppliedUpstream(*_split_commit(value))

    @property
    def bugs(self):
        # type: () -> Iterator[Tuple[Optional[str], str]]
        """The Bug and Bug-<vendor> fields as (vendor, url) pairs

        The vendor is None for the upstream "Bug" field.
        """
        for name, value in self.paragraph.items():
            if name == 'Bug':
                yield None, value
            elif name.startswith('Bug-'):
                yield name[len('Bug-'):], value

    def _description_field(self):
        # type: () -> Optional[str]
        return self.paragraph.get('Description', self.paragraph.get('Subject'))

    @property
    def description(self):
        # type: () -> Optional[str]
        """The first line of the Description (or Subject) field"""
        value = self._description_field()
        if value is None:
            return None
        return value.split('\n', 1)[0]

    @property
    def long_description(self):
        # type: () -> Optional[str]
        """Everything but the first line of the Description (or Subject) field"""
        value = self._description_field()
        if value is None:
            return None
        _, _, rest = value.partition('\n')
        return rest
