from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

@dataclass(frozen=True)
class Prefix:
    prefix: str
    uri: str

@dataclass(frozen=True)
class Triple:
    subject: str
    predicate: str
    object: str

@dataclass(frozen=True)
class OntologyHeader:
    uri: str # absolute, not shortened
    label: str = ""
    comment: str = ""
    imports: Tuple[str, ...] = ()

@dataclass(frozen=True)
class Class:
    uri: str
    label: str
    comment: str = ""
    sub_class_of: str = ""

@dataclass(frozen=True)
class Property:
    uri: str
    label: str
    comment: str = ""
    domain: str = ""
    range: str = ""

@dataclass(frozen=True)
class Instance:
    uri: str
    type: str = ""
    name: str = ""
    properties: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}), hash=False)

    def __post_init__(self):
        if not isinstance(self.properties, MappingProxyType):
            frozen = {k: tuple(v) for k, v in self.properties.items()}
            object.__setattr__(self, "properties", MappingProxyType(frozen))

@dataclass(frozen=True)
class ParsedDocument:
    prefixes: Tuple[Prefix, ...] = ()
    ontology: Optional[OntologyHeader] = None
    classes: Tuple[Class, ...] = ()
    properties: Tuple[Property, ...] = ()
    instances: Tuple[Instance, ...] = ()
    raw: str = ""

    def to_dict(self) -> dict:
        """Plain, JSON-ready copy of the document."""
        ontology = None
        if self.ontology is not None:
            ontology = {
                "uri": self.ontology.uri,
                "label": self.ontology.label,
                "comment": self.ontology.comment,
                "imports": list(self.ontology.imports),
            }
        return {
            "prefixes": [{"prefix": p.prefix, "uri": p.uri} for p in self.prefixes],
            "ontology": ontology,
            "classes": [
                {"uri": c.uri, "label": c.label, "comment": c.comment, "subClassOf": c.sub_class_of}
                for c in self.classes
            ],
            "properties": [
                {"uri": p.uri, "label": p.label, "comment": p.comment, "domain": p.domain, "range": p.range}
                for p in self.properties
            ],
            "instances": [
                {
                    "uri": i.uri,
                    "type": i.type,
                    "name": i.name,
                    "properties": {k: list(v) for k, v in i.properties.items()},
                }
                for i in self.instances
            ],
            "raw": self.raw,
        }

@dataclass(frozen=True)
class SchemaEntry:
    id: str
    name: str
    description: str
    file_name: str
    parsed: ParsedDocument
    is_user_uploaded: bool = False
