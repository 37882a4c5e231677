"""Graphviz attribute vocabulary and the entity kinds allowed to use each key.

Usage letters follow the Graphviz attribute reference: ``G`` graph, ``C``
cluster, ``N`` node, ``E`` edge. Subgraph-only attributes are listed under
``C`` since clusters are the only subgraphs modelled here.
"""

from dataclasses import dataclass
from enum import Enum


class EntityKind(str, Enum):
    GRAPH = "graph"
    CLUSTER = "cluster"
    NODE = "node"
    EDGE = "edge"


_LETTERS = {
    "G": EntityKind.GRAPH,
    "C": EntityKind.CLUSTER,
    "N": EntityKind.NODE,
    "E": EntityKind.EDGE,
}


@dataclass(slots=True, frozen=True)
class Attribute:
    name: str
    value: str

    def __post_init__(self) -> None:
        value = self.value
        if isinstance(value, bool):
            value = "true" if value else "false"
        elif not isinstance(value, str):
            value = str(value)
        object.__setattr__(self, "value", value)


@dataclass(slots=True, frozen=True)
class AttributeSpec:
    name: str
    used_by: frozenset[EntityKind]
    quoted: bool = False


def _spec(name: str, letters: str, quoted: bool = False) -> AttributeSpec:
    return AttributeSpec(
        name=name,
        used_by=frozenset(_LETTERS[letter] for letter in letters),
        quoted=quoted,
    )


_SPECS = [
    _spec("Damping", "G"),
    _spec("K", "GC"),
    _spec("URL", "ENGC", quoted=True),
    _spec("arrowhead", "E"),
    _spec("arrowsize", "E"),
    _spec("arrowtail", "E"),
    _spec("aspect", "G"),
    _spec("bb", "G"),
    _spec("bgcolor", "GC"),
    _spec("center", "G"),
    _spec("charset", "G"),
    _spec("clusterrank", "G"),
    _spec("color", "ENC"),
    _spec("colorscheme", "ENCG"),
    _spec("comment", "ENG", quoted=True),
    _spec("compound", "G"),
    _spec("concentrate", "G"),
    _spec("constraint", "E"),
    _spec("decorate", "E"),
    _spec("defaultdist", "G"),
    _spec("dim", "G"),
    _spec("dimen", "G"),
    _spec("dir", "E"),
    _spec("diredgeconstraints", "G"),
    _spec("distortion", "N"),
    _spec("dpi", "G"),
    _spec("edgeURL", "E", quoted=True),
    _spec("edgehref", "E", quoted=True),
    _spec("edgetarget", "E", quoted=True),
    _spec("edgetooltip", "E", quoted=True),
    _spec("epsilon", "G"),
    _spec("esep", "G"),
    _spec("fillcolor", "NC"),
    _spec("fixedsize", "N"),
    _spec("fontcolor", "ENGC"),
    _spec("fontname", "ENGC", quoted=True),
    _spec("fontnames", "G"),
    _spec("fontpath", "G", quoted=True),
    _spec("fontsize", "ENGC"),
    _spec("group", "N"),
    _spec("headURL", "E", quoted=True),
    _spec("headclip", "E"),
    _spec("headhref", "E", quoted=True),
    _spec("headlabel", "E", quoted=True),
    _spec("headport", "E"),
    _spec("headtarget", "E", quoted=True),
    _spec("headtooltip", "E", quoted=True),
    _spec("height", "N"),
    _spec("href", "GCNE", quoted=True),
    _spec("id", "GCNE", quoted=True),
    _spec("image", "N", quoted=True),
    _spec("imagescale", "N"),
    _spec("label", "ENGC", quoted=True),
    _spec("labelURL", "E", quoted=True),
    _spec("labelangle", "E"),
    _spec("labeldistance", "E"),
    _spec("labelfloat", "E"),
    _spec("labelfontcolor", "E"),
    _spec("labelfontname", "E", quoted=True),
    _spec("labelfontsize", "E"),
    _spec("labelhref", "E", quoted=True),
    _spec("labeljust", "GC"),
    _spec("labelloc", "NGC"),
    _spec("labeltarget", "E", quoted=True),
    _spec("labeltooltip", "E", quoted=True),
    _spec("landscape", "G"),
    _spec("layer", "ENC"),
    _spec("layers", "G", quoted=True),
    _spec("layersep", "G", quoted=True),
    _spec("layout", "G"),
    _spec("len", "E"),
    _spec("levels", "G"),
    _spec("levelsgap", "G"),
    _spec("lhead", "E"),
    _spec("lp", "EGC"),
    _spec("ltail", "E"),
    _spec("margin", "NCG"),
    _spec("maxiter", "G"),
    _spec("mclimit", "G"),
    _spec("mindist", "G"),
    _spec("minlen", "E"),
    _spec("mode", "G"),
    _spec("model", "G"),
    _spec("mosek", "G"),
    _spec("nodesep", "G"),
    _spec("nojustify", "GCNE"),
    _spec("normalize", "G"),
    _spec("nslimit", "G"),
    _spec("nslimit1", "G"),
    _spec("ordering", "GN"),
    _spec("orientation", "NG"),
    _spec("outputorder", "G"),
    _spec("overlap", "G"),
    _spec("overlap_scaling", "G"),
    _spec("pack", "G"),
    _spec("packmode", "G"),
    _spec("pad", "G"),
    _spec("page", "G"),
    _spec("pagedir", "G"),
    _spec("pencolor", "C"),
    _spec("penwidth", "CNE"),
    _spec("peripheries", "NC"),
    _spec("pin", "N"),
    _spec("pos", "EN"),
    _spec("quadtree", "G"),
    _spec("quantum", "G"),
    _spec("rank", "C"),
    _spec("rankdir", "G"),
    _spec("ranksep", "G"),
    _spec("ratio", "G"),
    _spec("rects", "N"),
    _spec("regular", "N"),
    _spec("remincross", "G"),
    _spec("repulsiveforce", "G"),
    _spec("resolution", "G"),
    _spec("root", "GN"),
    _spec("rotate", "G"),
    _spec("samehead", "E"),
    _spec("sametail", "E"),
    _spec("samplepoints", "N"),
    _spec("searchsize", "G"),
    _spec("sep", "G"),
    _spec("shape", "N"),
    _spec("shapefile", "N", quoted=True),
    _spec("showboxes", "ENG"),
    _spec("sides", "N"),
    _spec("size", "G"),
    _spec("skew", "N"),
    _spec("smoothing", "G"),
    _spec("sortv", "GCN"),
    _spec("splines", "G"),
    _spec("start", "G"),
    _spec("style", "ENC"),
    _spec("stylesheet", "G", quoted=True),
    _spec("tailURL", "E", quoted=True),
    _spec("tailclip", "E"),
    _spec("tailhref", "E", quoted=True),
    _spec("taillabel", "E", quoted=True),
    _spec("tailport", "E"),
    _spec("tailtarget", "E", quoted=True),
    _spec("tailtooltip", "E", quoted=True),
    _spec("target", "ENGC", quoted=True),
    _spec("tooltip", "NEC", quoted=True),
    _spec("truecolor", "G"),
    _spec("vertices", "N"),
    _spec("viewport", "G"),
    _spec("voro_margin", "G"),
    _spec("weight", "E"),
    _spec("width", "N"),
    _spec("z", "N"),
]

ATTRIBUTES: dict[str, AttributeSpec] = {spec.name: spec for spec in _SPECS}


def is_known(name: str) -> bool:
    return name in ATTRIBUTES


def usage(name: str) -> frozenset[EntityKind]:
    """Entity kinds allowed to carry ``name``; empty for unknown keys."""
    spec = ATTRIBUTES.get(name)
    if spec is None:
        return frozenset()
    return spec.used_by


def is_quoted(name: str) -> bool:
    spec = ATTRIBUTES.get(name)
    return spec is not None and spec.quoted


def used_by_graphs(attr: Attribute) -> bool:
    return EntityKind.GRAPH in usage(attr.name)


def used_by_clusters(attr: Attribute) -> bool:
    return EntityKind.CLUSTER in usage(attr.name)


def used_by_nodes(attr: Attribute) -> bool:
    return EntityKind.NODE in usage(attr.name)


def used_by_edges(attr: Attribute) -> bool:
    return EntityKind.EDGE in usage(attr.name)
