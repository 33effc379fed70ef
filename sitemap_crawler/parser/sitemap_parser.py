# File: sitemap_crawler/parser/sitemap_parser.py
"""sitemap_crawler.parser.sitemap_parser: разбор sitemap.xml и извлечение URL из <loc>."""

from __future__ import annotations

from typing import Iterator, Union

from lxml import etree


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True)


def iter_locations(xml_content: Union[str, bytes]) -> Iterator[str]:
    """Разбирает sitemap и возвращает итератор URL из тегов <loc>.

    Документ разбирается сразу, поэтому некорректный XML приводит к
    ``lxml.etree.XMLSyntaxError`` при вызове, а не при итерации.
    Ищутся только элементы ``loc`` в пространстве имён по умолчанию
    корневого элемента; sitemap index не раскрывается.

    Пример:
    ```python
    from sitemap_crawler.parser.sitemap_parser import iter_locations

    xml = b'<urlset xmlns="ns"><url><loc>http://a/1</loc></url></urlset>'
    print(list(iter_locations(xml)))  # ['http://a/1']
    ```
    """
    if isinstance(xml_content, str):
        xml_content = xml_content.encode("utf-8")
    root = etree.fromstring(xml_content, parser=_make_parser())
    namespace = root.nsmap.get(None)
    tag = f"{{{namespace}}}loc" if namespace else "loc"
    return _walk(root, tag)


def _walk(root: etree._Element, tag: str) -> Iterator[str]:
    for loc in root.iter(tag):
        text = "".join(loc.itertext()).strip()
        if text:
            yield text
