"""In-memory document model produced by the lossy deb822 parser

The model only keeps field names and values.  Comments and the original
whitespace are gone by the time a Deb822Document exists, so converting it back
to text gives the same fields in the same order, but not necessarily the same
bytes.
"""

from typing import Iterable, Iterator, List, Optional, Tuple, Union, overload


class Deb822Field:
    """A single "Name: Value" entry

    The value of a multi-line field has its continuation lines joined with
    "\\n" (without their indentation).
    """

    __slots__ = ('name', 'value')

    def __init__(self, name, value):
        # type: (str, str) -> None
        self.name = name
        self.value = value

    def __repr__(self):
        # type: () -> str
        return "{clsname}({name!r}, {value!r})".format(clsname=self.__class__.__name__,
                                                       name=self.name,
                                                       value=self.value,
                                                       )

    def __str__(self):
        # type: () -> str
        return self.name + ": " + self.value

    def __eq__(self, other):
        # type: (object) -> bool
        if not isinstance(other, Deb822Field):
            return NotImplemented
        return self.name == other.name and self.value == other.value

    __hash__ = None  # type: ignore

    def convert_to_text(self):
        # type: () -> str
        return str(self) + "\n"


class Deb822Paragraph:
    """An ordered list of fields

    Lookups by name are case-sensitive and return the first field with that
    name.  Duplicated fields are retained; use get_all to see all of them.

    >>> paragraph = Deb822Paragraph([("Package", "hello")])
    >>> paragraph.insert("Version", "2.10")
    >>> paragraph["Version"]
    '2.10'
    >>> list(paragraph.items())
    [('Package', 'hello'), ('Version', '2.10')]
    """

    __slots__ = ('_fields',)

    def __init__(self, fields=None):
        # type: (Optional[Iterable[Union[Deb822Field, Tuple[str, str]]]]) -> None
        self._fields = []  # type: List[Deb822Field]
        if fields is not None:
            for field in fields:
                if not isinstance(field, Deb822Field):
                    name, value = field
                    field = Deb822Field(name, value)
                self._fields.append(field)

    def __repr__(self):
        # type: () -> str
        return "{clsname}({fields!r})".format(clsname=self.__class__.__name__,
                                              fields=list(self.items()),
                                              )

    def __eq__(self, other):
        # type: (object) -> bool
        if not isinstance(other, Deb822Paragraph):
            return NotImplemented
        return self._fields == other._fields

    __hash__ = None  # type: ignore

    def __len__(self):
        # type: () -> int
        return len(self._fields)

    def is_empty(self):
        # type: () -> bool
        return not self._fields

    def __contains__(self, name):
        # type: (object) -> bool
        return any(f.name == name for f in self._fields)

    def __getitem__(self, name):
        # type: (str) -> str
        for field in self._fields:
            if field.name == name:
                return field.value
        raise KeyError(name)

    def __iter__(self):
        # type: () -> Iterator[str]
        """Iterate over the field names (duplicates included)"""
        return self.keys()

    def get(self, name, default=None):
        # type: (str, Optional[str]) -> Optional[str]
        """Return the value of the first field called name (or default)"""
        for field in self._fields:
            if field.name == name:
                return field.value
        return default

    def get_all(self, name):
        # type: (str) -> List[str]
        """Return the values of all fields called name in the order they appear"""
        return [f.value for f in self._fields if f.name == name]

    def keys(self):
        # type: () -> Iterator[str]
        return (f.name for f in self._fields)

    def items(self):
        # type: () -> Iterator[Tuple[str, str]]
        return ((f.name, f.value) for f in self._fields)

    def iter_fields(self):
        # type: () -> Iterator[Deb822Field]
        """Iterate over the fields themselves

        The fields are the live objects, so assigning to their value
        modifies the paragraph.
        """
        return iter(self._fields)

    def insert(self, name, value):
        # type: (str, str) -> None
        """Append a field (an existing field with the same name is kept)"""
        self._fields.append(Deb822Field(name, value))

    def convert_to_text(self):
        # type: () -> str
        return "".join(f.convert_to_text() for f in self._fields)


class Deb822Document:
    """The paragraphs of a deb822 file in the order they appear"""

    __slots__ = ('_paragraphs',)

    def __init__(self, paragraphs=None):
        # type: (Optional[Iterable[Deb822Paragraph]]) -> None
        self._paragraphs = list(paragraphs) if paragraphs is not None else []

    def __repr__(self):
        # type: () -> str
        return "{clsname}({paragraphs!r})".format(clsname=self.__class__.__name__,
                                                  paragraphs=self._paragraphs,
                                                  )

    def __eq__(self, other):
        # type: (object) -> bool
        if not isinstance(other, Deb822Document):
            return NotImplemented
        return self._paragraphs == other._paragraphs

    __hash__ = None  # type: ignore

    def __len__(self):
        # type: () -> int
        return len(self._paragraphs)

    def is_empty(self):
        # type: () -> bool
        return not self._paragraphs

    def __iter__(self):
        # type: () -> Iterator[Deb822Paragraph]
        return iter(self._paragraphs)

    @overload
    def __getitem__(self, item):
        # type: (int) -> Deb822Paragraph
        ...

    @overload
    def __getitem__(self, item):
        # type: (slice) -> List[Deb822Paragraph]
        ...

    def __getitem__(self, item):
        # type: (Union[int, slice]) -> Union[Deb822Paragraph, List[Deb822Paragraph]]
        return self._paragraphs[item]

    def append(self, paragraph):
        # type: (Deb822Paragraph) -> None
        self._paragraphs.append(paragraph)

    def convert_to_text(self):
        # type: () -> str
        """Serialize the document

        Each field is written as "Name: Value" and paragraphs are separated by
        an empty line.  Values are written as stored, so embedded newlines are
        not re-indented.
        """
        return "\n".join(p.convert_to_text() for p in self._paragraphs)

    def __str__(self):
        # type: () -> str
        return self.convert_to_text()
