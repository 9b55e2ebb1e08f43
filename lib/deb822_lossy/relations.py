""" Parsing of package relationship fields (Depends, Build-Depends, ...)

A relationship field is a conjunction (comma separated) of disjunctions
(pipe separated) of package references.  parse_relations returns that as a
list of lists of dicts::

    >>> rels = parse_relations("debhelper-compat (= 13), libfoo-dev | libbar-dev [amd64]")
    >>> [[alt['name'] for alt in or_deps] for or_deps in rels]
    [['debhelper-compat'], ['libfoo-dev', 'libbar-dev']]
    >>> rels[0][0]['version']
    ('=', '13')
    >>> format_relations(rels)
    'debhelper-compat (= 13), libfoo-dev | libbar-dev [amd64]'

Each dict has the keys:

 * name: the package name
 * archqual: the architecture qualifier ("any" in "python3:any") or None
 * version: a (relop, version) tuple or None
 * arch: a list of ArchRestriction(enabled, arch) or None
 * restrictions: a list of lists of BuildRestriction(enabled, profile) or
   None.  Each inner list is one "<...>" group.

The version is not validated; it is whatever stands between the operator
and the closing parenthesis.
"""

import collections
import logging
import re

from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

ArchRestriction = collections.namedtuple('ArchRestriction', ['enabled', 'arch'])
BuildRestriction = collections.namedtuple('BuildRestriction', ['enabled', 'profile'])

Relation = Dict[str, Any]

_RE_DEPENDENCY = re.compile(
    r'^\s*(?P<name>[a-zA-Z0-9.+\-]{2,})'
    r'(:(?P<archqual>([a-zA-Z0-9][a-zA-Z0-9-]*)))?'
    r'(\s*\(\s*(?P<relop>[>=<]+)\s*'
    r'(?P<version>[^)\s]+)\s*\))?'
    r'(\s*\[(?P<archs>[\s!\w\-]+)\])?\s*'
    r'((?P<restrictions><.+>))?\s*'
    r'$', re.DOTALL)
_RE_COMMA_SEP = re.compile(r'\s*,\s*')
_RE_PIPE_SEP = re.compile(r'\s*\|\s*')
_RE_BLANK_SEP = re.compile(r'\s+')
_RE_RESTRICTION_SEP = re.compile(r'>\s*<')
_RE_RESTRICTION = re.compile(r'(?P<enabled>!)?(?P<profile>\S+)')


def _parse_archs(raw):
    # type: (str) -> List[ArchRestriction]
    # assumption: no space between '!' and architecture name
    archs = []
    for arch in _RE_BLANK_SEP.split(raw.strip()):
        if not arch:
            continue
        disabled = arch[0] == '!'
        if disabled:
            arch = arch[1:]
        archs.append(ArchRestriction(not disabled, arch))
    return archs


def _parse_restrictions(raw):
    # type: (str) -> List[List[BuildRestriction]]
    restrictions = []
    for group_text in _RE_RESTRICTION_SEP.split(raw.lower().strip('<> ')):
        group = []
        for restriction in _RE_BLANK_SEP.split(group_text.strip()):
            match = _RE_RESTRICTION.match(restriction)
            if match:
                group.append(BuildRestriction(match.group('enabled') != '!',
                                              match.group('profile'),
                                              ))
        restrictions.append(group)
    return restrictions


def _parse_relation(raw):
    # type: (str) -> Relation
    match = _RE_DEPENDENCY.match(raw)
    if match:
        parts = match.groupdict()
        relation = {
            'name': parts['name'],
            'archqual': parts['archqual'],
            'version': None,
            'arch': None,
            'restrictions': None,
        }  # type: Relation
        if parts['relop'] or parts['version']:
            relation['version'] = (parts['relop'], parts['version'])
        if parts['archs']:
            relation['arch'] = _parse_archs(parts['archs']) or None
        if parts['restrictions']:
            relation['restrictions'] = _parse_restrictions(parts['restrictions'])
        return relation

    logger.warning('cannot parse package relationship "%s", returning it raw', raw)
    return {
        'name': raw,
        'archqual': None,
        'version': None,
        'arch': None,
        'restrictions': None,
    }


def parse_relations(raw):
    # type: (str) -> List[List[Relation]]
    """Parse a package relationship field value

    Empty entries (e.g. from a trailing comma or a stray "|") are skipped.
    An entry that cannot be parsed is logged and returned with its raw text
    as name.
    """
    relations = []
    for or_deps in _RE_COMMA_SEP.split(raw.strip()):
        alternatives = [_parse_relation(dep) for dep in _RE_PIPE_SEP.split(or_deps) if dep]
        if alternatives:
            relations.append(alternatives)
    return relations


def _format_arch(arch_spec):
    # type: (ArchRestriction) -> str
    return ('' if arch_spec.enabled else '!') + arch_spec.arch


def _format_restrictions(group):
    # type: (List[BuildRestriction]) -> str
    return '<%s>' % ' '.join(('' if term.enabled else '!') + term.profile for term in group)


def _format_relation(dep):
    # type: (Relation) -> str
    s = dep['name']
    if dep.get('archqual') is not None:
        s += ':%s' % dep['archqual']
    version = dep.get('version')  # type: Optional[Any]
    if version is not None:
        s += ' (%s %s)' % version
    arch = dep.get('arch')
    if arch is not None:
        s += ' [%s]' % ' '.join(_format_arch(a) for a in arch)
    restrictions = dep.get('restrictions')
    if restrictions is not None:
        s += ' %s' % ' '.join(_format_restrictions(r) for r in restrictions)
    return s


def format_relations(rels):
    # type: (List[List[Relation]]) -> str
    """Format a parsed relationship field back into its textual form"""
    return ', '.join(' | '.join(_format_relation(dep) for dep in or_deps) for or_deps in rels)
