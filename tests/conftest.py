"""
Shared Turtle documents for the test suite.

Each document is exposed both as a module constant (for parametrized tests)
and as a fixture.
"""
import os
import sys

import pytest

# Make the package importable without installing it
root_dir = os.path.join(os.path.dirname(__file__), "..")
if root_dir not in sys.path:
    sys.path.insert(0, root_dir)

CARD_TTL = """@prefix : <http://ex.org/> .
@prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .
@prefix rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#> .
:Card rdf:type rdfs:Class ; rdfs:label "Card" ; rdfs:comment "A playable card" .
:cost rdf:type rdf:Property ; rdfs:domain :Card ; rdfs:range xsd:integer .
:c1 rdf:type :Card ; :cost "3" .
"""

# Well-formed Turtle that rdflib can read as well
LIBRARY_TTL = """
@prefix : <http://example.org/library#> .
@prefix owl: <http://www.w3.org/2002/07/owl#> .
@prefix rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#> .
@prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .
@prefix schema: <https://schema.org/> .
@prefix xsd: <http://www.w3.org/2001/XMLSchema#> .

# Ontology header
<http://example.org/library> a owl:Ontology ;
    rdfs:label "Library"@en ;
    rdfs:comment "Books, authors and loans" ;
    owl:imports <http://example.org/people> , <https://schema.org/> .

:Work a rdfs:Class ;
    rdfs:label "Work" .

:Book a rdfs:Class ;
    rdfs:label "Book"@en , "Livre"@fr ;
    rdfs:comment "A bound work # not a comment" ;
    rdfs:subClassOf :Work .

:Author a rdfs:Class .   # no label on purpose

:writtenBy a rdf:Property ;
    rdfs:label "written by" ;
    rdfs:domain :Book ;
    rdfs:range :Author .

:pages a rdf:Property ;
    rdfs:domain :Book ;
    rdfs:range xsd:integer .

:tolkien a :Author ;
    schema:name "J. R. R. Tolkien"@en .

:hobbit a :Book ;
    schema:name "The Hobbit" ;
    :writtenBy :tolkien ;
    :pages "310"^^xsd:integer ;
    :price 12.5 ;
    :edition [ :year "1937" ; :publisher [ schema:name "Allen & Unwin" ] ] .
"""

PREFIXES = """@prefix : <http://ex.org/> .
@prefix rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#> .
@prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .
@prefix owl: <http://www.w3.org/2002/07/owl#> .
"""


@pytest.fixture
def card_ttl():
    return CARD_TTL


@pytest.fixture
def library_ttl():
    return LIBRARY_TTL


@pytest.fixture
def prefixes():
    return PREFIXES
