""" Read access to debian/control files

>>> control = Control.from_text('''\\
... Source: foo
... Priority: optional
... Build-Depends: debhelper-compat (= 13)
...
... Package: libfoo1
... Architecture: any
... ''')
>>> control.source.name
'foo'
>>> control.source.priority
<Priority.OPTIONAL: 'optional'>
>>> [binary.name for binary in control.binaries]
['libfoo1']

Values are returned as found in the file.  Accessors for fields with a known
structure (relationship fields, Priority, Rules-Requires-Root) return None
when the field is absent and, for enumerations, also when the value is not
understood.
"""

import enum
import logging

from typing import Iterator, List, Optional

from deb822_lossy._lossy import Deb822Document, Deb822Paragraph, parse_deb822_text
from deb822_lossy.relations import Relation, parse_relations
from deb822_lossy.vcs import VcsInfo

logger = logging.getLogger(__name__)


class Priority(enum.Enum):
    REQUIRED = 'required'
    IMPORTANT = 'important'
    STANDARD = 'standard'
    OPTIONAL = 'optional'
    EXTRA = 'extra'


def _priority(paragraph):
    # type: (Deb822Paragraph) -> Optional[Priority]
    value = paragraph.get('Priority')
    if value is None:
        return None
    try:
        return Priority(value)
    except ValueError:
        logger.debug('Unknown priority "%s"', value)
        return None


def _relation_field(field_name, doc=None):
    # type: (str, Optional[str]) -> property
    def _getter(self):
        # type: (_ControlParagraph) -> Optional[List[List[Relation]]]
        value = self.paragraph.get(field_name)
        if value is None:
            return None
        return parse_relations(value)
    if doc is None:
        doc = 'The parsed "{}" field (see deb822_lossy.relations)'.format(field_name)
    return property(_getter, doc=doc)


def _str_field(field_name, doc=None):
    # type: (str, Optional[str]) -> property
    def _getter(self):
        # type: (_ControlParagraph) -> Optional[str]
        return self.paragraph.get(field_name)
    return property(_getter, doc=doc)


class _ControlParagraph:

    __slots__ = ('paragraph',)

    def __init__(self, paragraph):
        # type: (Deb822Paragraph) -> None
        self.paragraph = paragraph

    def __repr__(self):
        # type: () -> str
        return "{clsname}({paragraph!r})".format(clsname=self.__class__.__name__,
                                                 paragraph=self.paragraph,
                                                 )

    section = _str_field('Section')
    architecture = _str_field('Architecture')
    homepage = _str_field('Homepage')

    @property
    def priority(self):
        # type: () -> Optional[Priority]
        return _priority(self.paragraph)


class Source(_ControlParagraph):
    """The source paragraph of a debian/control file"""

    __slots__ = ()

    name = _str_field('Source', doc='The name of the source package')
    maintainer = _str_field('Maintainer')
    standards_version = _str_field('Standards-Version')
    vcs_git = _str_field('Vcs-Git')
    vcs_browser = _str_field('Vcs-Browser')

    build_depends = _relation_field('Build-Depends')
    build_depends_indep = _relation_field('Build-Depends-Indep')
    build_depends_arch = _relation_field('Build-Depends-Arch')
    build_conflicts = _relation_field('Build-Conflicts')
    build_conflicts_indep = _relation_field('Build-Conflicts-Indep')
    build_conflicts_arch = _relation_field('Build-Conflicts-Arch')

    @property
    def uploaders(self):
        # type: () -> Optional[List[str]]
        value = self.paragraph.get('Uploaders')
        if value is None:
            return None
        return [u.strip() for u in value.split(',') if u.strip()]

    @property
    def vcs_git_info(self):
        # type: () -> Optional[VcsInfo]
        value = self.vcs_git
        if value is None:
            return None
        return VcsInfo.from_str(value)

    @property
    def rules_requires_root(self):
        # type: () -> Optional[bool]
        """Whether the package needs (fake)root to build

        Returns None if the field is absent or contains keywords rather than
        a plain "yes" or "no".
        """
        value = self.paragraph.get('Rules-Requires-Root')
        if value is None:
            return None
        value = value.strip().lower()
        if value == 'yes':
            return True
        if value == 'no':
            return False
        logger.debug('Rules-Requires-Root is neither "yes" nor "no": "%s"', value)
        return None


class Binary(_ControlParagraph):
    """A binary package paragraph of a debian/control file"""

    __slots__ = ()

    name = _str_field('Package', doc='The name of the binary package')
    multi_arch = _str_field('Multi-Arch')
    essential = _str_field('Essential')
    description = _str_field('Description')

    depends = _relation_field('Depends')
    recommends = _relation_field('Recommends')
    suggests = _relation_field('Suggests')
    enhances = _relation_field('Enhances')
    pre_depends = _relation_field('Pre-Depends')
    breaks = _relation_field('Breaks')
    conflicts = _relation_field('Conflicts')
    replaces = _relation_field('Replaces')
    provides = _relation_field('Provides')
    built_using = _relation_field('Built-Using')


class Control:
    """A parsed debian/control file"""

    __slots__ = ('document',)

    def __init__(self, document):
        # type: (Deb822Document) -> None
        self.document = document

    @classmethod
    def from_text(cls, text):
        # type: (str) -> Control
        """Parse a debian/control file

        :raises Deb822ParseError: The text is not a valid deb822 file.
        """
        return cls(parse_deb822_text(text))

    @property
    def source(self):
        # type: () -> Optional[Source]
        """The first paragraph with a Source field"""
        for paragraph in self.document:
            if 'Source' in paragraph:
                return Source(paragraph)
        return None

    @property
    def binaries(self):
        # type: () -> Iterator[Binary]
        """The paragraphs with a Package field"""
        return (Binary(p) for p in self.document if 'Package' in p)

    def convert_to_text(self):
        # type: () -> str
        return self.document.convert_to_text()
