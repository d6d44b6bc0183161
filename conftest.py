import pytest
from pathlib import Path

from bindgen.parsers import ClassSymbol, FunctionSymbol, Parameter, SymbolKind, SymbolTable, VariableSymbol, Visibility


@pytest.fixture
def temp_dir(tmp_path) -> Path:
    return Path(tmp_path)


def make_vector3() -> ClassSymbol:
    """The Vector3 struct shared by the generator tests."""
    cls = ClassSymbol('Vector3', SymbolKind.STRUCT)
    cls.add_child(VariableSymbol('x', 'float'))
    cls.add_child(VariableSymbol('y', 'float'))
    cls.add_child(VariableSymbol('z', 'float'))
    cls.add_child(FunctionSymbol('Vector3'))
    cls.add_child(FunctionSymbol('Vector3', parameters=[
        Parameter('x', 'float'), Parameter('y', 'float'), Parameter('z', 'float')]))
    cls.add_child(FunctionSymbol('Length', 'float', is_const=True))
    cls.add_child(FunctionSymbol('Normalize', 'void'))
    cls.add_child(FunctionSymbol('Dot', 'float', is_static=True, parameters=[
        Parameter('a', 'const Vector3 &'), Parameter('b', 'const Vector3 &')]))
    return cls


def make_transform() -> ClassSymbol:
    """A class mixing fields of generated types, a const member and a static."""
    cls = ClassSymbol('Transform')
    cls.add_child(VariableSymbol('pos', 'Vector3'))
    cls.add_child(VariableSymbol('scale', 'float'))
    cls.add_child(VariableSymbol('origin', 'const Vector3'))
    cls.add_child(VariableSymbol('hidden', 'int', visibility=Visibility.PRIVATE))
    cls.add_child(VariableSymbol('count', 'int', is_static=True))
    cls.add_child(VariableSymbol('maxCount', 'const int', is_static=True))
    cls.add_child(FunctionSymbol('Transform'))
    cls.add_child(FunctionSymbol('Transform', parameters=[Parameter('seed', 'int')], visibility=Visibility.PRIVATE))
    cls.add_child(FunctionSymbol('SetPos', 'void', parameters=[Parameter('pos', 'const Vector3 &')]))
    cls.add_child(FunctionSymbol('SetPos', 'void', parameters=[
        Parameter('x', 'float'), Parameter('y', 'float'), Parameter('z', 'float')]))
    cls.add_child(FunctionSymbol('Identity', 'Transform', is_static=True))
    cls.add_child(FunctionSymbol('operator==', 'bool', parameters=[Parameter('rhs', 'const Transform &')],
                                 is_const=True))
    cls.add_child(FunctionSymbol('toString', 'QString', is_const=True))
    cls.add_child(FunctionSymbol('Recompute', 'void', visibility=Visibility.PRIVATE))
    cls.add_child(FunctionSymbol('~Transform'))
    return cls


def make_filtered() -> ClassSymbol:
    """A class whose members mostly fail the scriptability checks."""
    cls = ClassSymbol('Filtered')
    cls.add_child(VariableSymbol('name', 'std::string'))
    cls.add_child(VariableSymbol('buffer', 'char *'))
    cls.add_child(VariableSymbol('secret', 'int'))
    cls.children[-1].set_comments(['Internal counter [noscript]'])
    cls.add_child(VariableSymbol('samples', 'float *'))
    cls.add_child(VariableSymbol('label', 'char*'))
    cls.add_child(VariableSymbol('grid', 'float', args_string='[3][3]'))
    cls.add_child(VariableSymbol('visible', 'int'))
    cls.add_child(FunctionSymbol('Fill', 'void', parameters=[Parameter('v', 'float')], args_string='(float v[3])'))
    cls.add_child(FunctionSymbol('SetFlag', 'void', parameters=[Parameter('flag', 'bool *')]))
    cls.add_child(FunctionSymbol('Normal', 'const float3 *', is_const=True))
    cls.add_child(FunctionSymbol('SetLabel', 'void', parameters=[Parameter('text', 'const char*')]))
    cls.add_child(FunctionSymbol('Get', 'int', is_const=True))
    cls.add_child(FunctionSymbol('Raw', 'int'))
    cls.children[-1].set_comments([], return_comment='raw handle [noscript]')
    return cls


def make_handle() -> ClassSymbol:
    """An opaque class with a single public field."""
    cls = ClassSymbol('Handle')
    ctor = cls.add_child(FunctionSymbol('Handle'))
    ctor.set_comments(['Wraps a native resource. [opaque-qtscript]'])
    cls.add_child(VariableSymbol('id', 'int'))
    return cls


def make_plain() -> ClassSymbol:
    """A struct that declares no constructor."""
    cls = ClassSymbol('Plain', SymbolKind.STRUCT)
    cls.add_child(VariableSymbol('value', 'int'))
    return cls


@pytest.fixture
def vector3() -> ClassSymbol:
    return make_vector3()


@pytest.fixture
def transform() -> ClassSymbol:
    return make_transform()


@pytest.fixture
def filtered() -> ClassSymbol:
    return make_filtered()


@pytest.fixture
def handle() -> ClassSymbol:
    return make_handle()


@pytest.fixture
def plain() -> ClassSymbol:
    return make_plain()


@pytest.fixture
def symbol_table() -> SymbolTable:
    return SymbolTable([make_vector3(), make_transform(), make_filtered(), make_handle(), make_plain()])


@pytest.fixture(autouse=True)
def fresh_logging():
    """Rebind the bindgen logger to the current stderr for every test."""
    from bindgen import logger
    logger.init_logging()
    yield
