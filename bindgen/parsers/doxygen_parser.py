"""
Parser for Doxygen XML output, producing class symbols with their members.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .. import logger
from .symbols import (
    BaseSymbol, ClassSymbol, FunctionSymbol, Parameter, SymbolFactory,
    VariableSymbol, Visibility, has_top_level_const,
)


class DoxygenParser:
    """
    Parses Doxygen XML output into ClassSymbol trees.

    Only class and struct compounds are read. Each compound's function and
    variable members become children of the class, ordered by declaration line
    because Doxygen groups members by section rather than by source order.
    """

    COMPOUND_KINDS = ('class', 'struct')
    MEMBER_KINDS = ('function', 'variable')

    def __init__(self, xml_dir: Path):
        """
        Args:
            xml_dir: Path to the Doxygen XML directory (the one holding index.xml)
        """
        self.xml_dir = Path(xml_dir)
        self._classes: Dict[str, ClassSymbol] = {}
        self._parsed = False

    def parse(self) -> None:
        """Parse index.xml and every class/struct compound file it lists."""
        if self._parsed:
            return

        index_file = self.xml_dir / 'index.xml'
        if not index_file.exists():
            raise FileNotFoundError(f"Doxygen index.xml not found at {index_file}")

        logger.info(f"Parsing Doxygen XML from {self.xml_dir}")

        tree = ET.parse(index_file)
        root = tree.getroot()

        for compound in root.findall('.//compound'):
            refid = compound.get('refid')
            kind = compound.get('kind')

            if kind in self.COMPOUND_KINDS:
                compound_file = self.xml_dir / f'{refid}.xml'
                if compound_file.exists():
                    self._parse_compound_file(compound_file, kind)
                else:
                    logger.warning(f"Compound file {compound_file} listed in index.xml is missing")

        self._parsed = True
        logger.info(f"Parsed {len(self._classes)} classes from Doxygen XML")

    def parse_classes(self) -> List[ClassSymbol]:
        """Parse (once) and return all class and struct symbols in index order."""
        self.parse()
        return list(self._classes.values())

    def _parse_compound_file(self, file_path: Path, compound_kind: str) -> None:
        """Parse a single compound XML file into a ClassSymbol."""
        try:
            tree = ET.parse(file_path)
            root = tree.getroot()
        except ET.ParseError as e:
            logger.warning(f"Failed to parse {file_path}: {e}")
            return

        compounddef = root.find('compounddef')
        if compounddef is None:
            return

        class_symbol = self._parse_class_symbol(compounddef, compound_kind)
        if class_symbol is None:
            return

        members: List[Tuple[int, int, BaseSymbol]] = []
        for sectiondef in compounddef.findall('sectiondef'):
            for memberdef in sectiondef.findall('memberdef'):
                if memberdef.get('kind') not in self.MEMBER_KINDS:
                    continue
                member = self._parse_member_symbol(memberdef, class_symbol)
                if member is not None:
                    members.append((member.line_start, len(members), member))

        # Members without a location sort by their position in the file.
        members.sort(key=lambda entry: (entry[0] == 0, entry[0], entry[1]))
        for _, _, member in members:
            class_symbol.add_child(member)

        self._classes[class_symbol.qualified_name] = class_symbol

    def _parse_class_symbol(self, compounddef: ET.Element, compound_kind: str) -> Optional[ClassSymbol]:
        """Parse a compounddef element to extract class/struct symbol."""
        symbol = SymbolFactory.create_from_string(compound_kind)

        compoundname_elem = compounddef.find('compoundname')
        if compoundname_elem is not None and compoundname_elem.text:
            symbol.qualified_name = compoundname_elem.text.strip()
            symbol.name = symbol.qualified_name.split('::')[-1]
        else:
            return None

        location = compounddef.find('location')
        if location is not None:
            symbol.file_path = location.get('file', '')
            symbol.line_start = int(location.get('line', 0))

        comments, return_comment = self._parse_comments(compounddef)
        symbol.set_comments(comments, return_comment)
        return symbol

    def _parse_member_symbol(self, memberdef: ET.Element, class_symbol: ClassSymbol) -> Optional[BaseSymbol]:
        """Parse a function or variable memberdef."""
        symbol = SymbolFactory.create_from_string(memberdef.get('kind'))

        name_elem = memberdef.find('name')
        if name_elem is not None and name_elem.text:
            symbol.name = name_elem.text.strip()
        else:
            return None

        qualifiedname_elem = memberdef.find('qualifiedname')
        if qualifiedname_elem is not None and qualifiedname_elem.text:
            symbol.qualified_name = qualifiedname_elem.text.strip()
        else:
            symbol.qualified_name = f"{class_symbol.qualified_name}::{symbol.name}"

        type_elem = memberdef.find('type')
        if type_elem is not None:
            symbol.type = self._get_element_text(type_elem)

        symbol.is_static = memberdef.get('static') == 'yes'
        symbol.visibility = self._parse_visibility(memberdef.get('prot', 'public'))

        argsstring_elem = memberdef.find('argsstring')
        if argsstring_elem is not None and argsstring_elem.text:
            symbol.args_string = argsstring_elem.text.strip()
        else:
            symbol.args_string = ''

        if isinstance(symbol, FunctionSymbol):
            symbol.is_const = memberdef.get('const') == 'yes'
            symbol.parameters = self._parse_parameters(memberdef)
        elif isinstance(symbol, VariableSymbol):
            symbol.is_const = has_top_level_const(symbol.type)

        location = memberdef.find('location')
        if location is not None:
            symbol.file_path = location.get('file', class_symbol.file_path)
            symbol.line_start = int(location.get('line', 0))
        else:
            symbol.file_path = class_symbol.file_path

        comments, return_comment = self._parse_comments(memberdef)
        symbol.set_comments(comments, return_comment)
        return symbol

    def _parse_parameters(self, memberdef: ET.Element) -> List[Parameter]:
        parameters = []
        for index, param in enumerate(memberdef.findall('param')):
            param_type = ''
            param_name = ''

            type_elem = param.find('type')
            if type_elem is not None:
                param_type = self._get_element_text(type_elem)

            declname = param.find('declname')
            if declname is not None and declname.text:
                param_name = declname.text.strip()

            array_elem = param.find('array')
            if array_elem is not None and array_elem.text:
                param_type += array_elem.text.strip()

            # 'f(void)' is reported as a single unnamed void parameter.
            if param_type == 'void' and not param_name:
                continue
            if param_type:
                parameters.append(Parameter(param_name, param_type))
        return parameters

    @staticmethod
    def _parse_visibility(prot: str) -> Visibility:
        try:
            return Visibility(prot)
        except ValueError:
            logger.debug(f"Treating unknown protection level '{prot}' as private")
            return Visibility.PRIVATE

    def _parse_comments(self, element: ET.Element) -> Tuple[List[str], Optional[str]]:
        """
        Collect the brief and detailed description paragraphs of a symbol.

        Returns:
            (comments, return_comment): one entry per paragraph, with any
            'return' simplesect split out as the return comment.
        """
        comments: List[str] = []
        return_parts: List[str] = []

        for tag in ('briefdescription', 'detaileddescription'):
            description = element.find(tag)
            if description is None:
                continue
            for para in description.findall('para'):
                text = self._collect_text(para, skip=('simplesect',))
                if text:
                    comments.append(text)
                for simplesect in para.iter('simplesect'):
                    text = self._collect_text(simplesect)
                    if not text:
                        continue
                    if simplesect.get('kind') == 'return':
                        return_parts.append(text)
                    else:
                        comments.append(text)

        return_comment = ' '.join(return_parts) if return_parts else None
        return comments, return_comment

    def _collect_text(self, element: ET.Element, skip: Tuple[str, ...] = ()) -> str:
        """All text below element, skipping subtrees whose tag is in skip."""
        parts = []
        if element.text:
            parts.append(element.text)
        for child in element:
            if child.tag not in skip:
                parts.append(self._collect_text(child, skip))
            if child.tail:
                parts.append(child.tail)
        return ' '.join(''.join(parts).split())

    def _get_element_text(self, element: ET.Element) -> str:
        """Extract all text content from an element, including nested refs."""
        return ' '.join(''.join(element.itertext()).split())
