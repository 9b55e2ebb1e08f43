""" Splitting of Vcs-* field values

Vcs-Git (and friends) may carry a branch and a subpath after the repository
URL::

    Vcs-Git: https://salsa.debian.org/python-team/foo.git -b debian/main [sub/dir]

>>> info = VcsInfo.from_str("https://example.com/foo.git -b debian/main [sub/dir]")
>>> info.repo_url, info.branch, info.subpath
('https://example.com/foo.git', 'debian/main', 'sub/dir')
>>> str(info)
'https://example.com/foo.git -b debian/main [sub/dir]'
"""

import re

from typing import Optional

_RE_SUBPATH = re.compile(r' \[([^] ]+)\]')
_BRANCH_SEPARATOR = ' -b '


class VcsInfo:
    """The repository URL, branch and subpath of a Vcs-* field

    Neither the URL nor the branch name are validated.
    """

    __slots__ = ('repo_url', 'branch', 'subpath')

    def __init__(self, repo_url, branch=None, subpath=None):
        # type: (str, Optional[str], Optional[str]) -> None
        self.repo_url = repo_url
        self.branch = branch
        self.subpath = subpath

    @classmethod
    def from_str(cls, text):
        # type: (str) -> VcsInfo
        text = text.strip()
        subpath = None
        m = _RE_SUBPATH.search(text)
        if m is not None:
            subpath = m.group(1)
            text = text[:m.start()] + text[m.end():]

        url, sep, branch = text.partition(_BRANCH_SEPARATOR)
        return cls(url, branch if sep else None, subpath)

    def __str__(self):
        # type: () -> str
        url = self.repo_url
        if self.branch is not None:
            url += _BRANCH_SEPARATOR + self.branch
        if self.subpath is not None:
            url += ' [' + self.subpath + ']'
        return url

    def __repr__(self):
        # type: () -> str
        return "{clsname}({url!r}, branch={branch!r}, subpath={subpath!r})".format(
            clsname=self.__class__.__name__,
            url=self.repo_url,
            branch=self.branch,
            subpath=self.subpath,
        )

    def __eq__(self, other):
        # type: (object) -> bool
        if not isinstance(other, VcsInfo):
            return NotImplemented
        return (self.repo_url, self.branch, self.subpath) == \
            (other.repo_url, other.branch, other.subpath)

    __hash__ = None  # type: ignore
