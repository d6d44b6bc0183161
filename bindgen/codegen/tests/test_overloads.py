import pytest

from bindgen.codegen.code_writer import CodeWriter
from bindgen.codegen.overloads import (
    DispatchEntry, SelectorGenerator, collect_overload_sets, implicit_default_constructor, scriptable_functions,
    selector_name, wrapped_functions, wrapper_name,
)
from bindgen.parsers import ClassSymbol, FunctionSymbol, Parameter, Visibility


class TestWrapperName:
    def test_no_parameters(self, vector3):
        assert wrapper_name(vector3.functions_named('Normalize')[0]) == 'Vector3_Normalize'

    def test_parameter_type_ids(self, vector3):
        assert wrapper_name(vector3.constructors()[1]) == 'Vector3_Vector3_afloat_afloat_afloat'

    def test_const_suffix(self, vector3):
        assert wrapper_name(vector3.functions_named('Length')[0]) == 'Vector3_Length_const'

    def test_qualifiers_do_not_leak_into_name(self, transform):
        assert wrapper_name(transform.functions_named('SetPos')[0]) == 'Transform_SetPos_aVector3'

    def test_overloads_get_distinct_names(self):
        cls = ClassSymbol('C')
        a = cls.add_child(FunctionSymbol('f', 'void', parameters=[Parameter('a', 'unsigned int')]))
        b = cls.add_child(FunctionSymbol('f', 'void', parameters=[Parameter('a', 'unsigned'), Parameter('b', 'int')]))
        assert wrapper_name(a) != wrapper_name(b)

    def test_method_name_is_escaped(self):
        cls = ClassSymbol('C')
        assert wrapper_name(cls.add_child(FunctionSymbol('set_value', 'void'))) == 'C_set__value'

    def test_parameter_type_and_name_suffix_do_not_collide(self):
        cls = ClassSymbol('C')
        typed = cls.add_child(FunctionSymbol('f', 'void', parameters=[Parameter('a', 'int')]))
        suffixed = cls.add_child(FunctionSymbol('f_int', 'void'))
        assert wrapper_name(typed) == 'C_f_aint'
        assert wrapper_name(suffixed) == 'C_f__int'

    def test_const_marker_and_name_suffix_do_not_collide(self):
        cls = ClassSymbol('C')
        const = cls.add_child(FunctionSymbol('g', 'int', is_const=True))
        suffixed = cls.add_child(FunctionSymbol('g_const', 'int'))
        assert wrapper_name(const) == 'C_g_const'
        assert wrapper_name(suffixed) == 'C_g__const'

    def test_escaped_type_and_const_marker_do_not_collide(self):
        cls = ClassSymbol('C')
        escaped = cls.add_child(FunctionSymbol('h', 'void', parameters=[Parameter('a', 'a:onst')]))
        const = cls.add_child(FunctionSymbol('h', 'void', parameters=[Parameter('a', 'a')], is_const=True))
        assert wrapper_name(escaped) != wrapper_name(const)

    def test_wrapper_never_matches_a_selector(self):
        cls = ClassSymbol('C')
        cls.add_child(FunctionSymbol('f', 'void', parameters=[Parameter('a', 'int')]))
        cls.add_child(FunctionSymbol('f', 'void', parameters=[Parameter('a', 'float')]))
        named_like_selector = cls.add_child(FunctionSymbol('f_selector', 'void'))
        named_ctor = cls.add_child(FunctionSymbol('ctor', 'void'))
        assert wrapper_name(named_like_selector) != selector_name(cls, 'f')
        assert wrapper_name(named_ctor) != selector_name(cls, 'C')


class TestSelectorName:
    def test_constructor(self, vector3):
        assert selector_name(vector3, 'Vector3') == 'Vector3_Vector3_selector'

    def test_method(self, transform):
        assert selector_name(transform, 'SetPos') == 'Transform_SetPos_selector'


class TestCollectOverloadSets:
    def test_sets_in_first_declaration_order(self, transform):
        assert list(collect_overload_sets(transform)) == ['Transform', 'SetPos', 'Identity', 'toString']

    def test_operators_are_excluded(self, transform):
        assert 'operator==' not in collect_overload_sets(transform)

    def test_unscriptable_functions_are_excluded(self, filtered):
        assert list(collect_overload_sets(filtered)) == ['Get', 'Filtered']

    def test_constructor_always_needs_selector(self, transform):
        ctor_set = collect_overload_sets(transform)['Transform']
        assert len(ctor_set.candidates) == 1
        assert ctor_set.needs_selector
        assert ctor_set.bound_name() == 'Transform_Transform_selector'

    def test_single_method_binds_wrapper(self, vector3):
        length = collect_overload_sets(vector3)['Length']
        assert not length.needs_selector
        assert length.selector_name is None
        assert length.bound_name() == 'Vector3_Length_const'

    def test_overloaded_method_binds_selector(self, transform):
        assert collect_overload_sets(transform)['SetPos'].bound_name() == 'Transform_SetPos_selector'

    def test_implicit_constructor(self, plain):
        ctor_set = collect_overload_sets(plain)['Plain']
        assert len(ctor_set.candidates) == 1
        implicit = ctor_set.candidates[0]
        assert implicit.is_constructor
        assert implicit.parameters == []
        assert implicit not in plain.children

    def test_unscriptable_constructors_leave_empty_set(self):
        cls = ClassSymbol('Buf')
        cls.add_child(FunctionSymbol('Buf', parameters=[Parameter('data', 'const char *')]))
        ctor_set = collect_overload_sets(cls)['Buf']
        assert ctor_set.candidates == []
        assert ctor_set.needs_selector

    def test_non_public_functions_are_excluded(self, transform):
        names = [f.name for f in scriptable_functions(transform)]
        assert 'Recompute' not in names
        assert [len(c.parameters) for c in collect_overload_sets(transform)['Transform'].candidates] == [0]

    def test_private_constructor_gets_no_implicit_one(self):
        cls = ClassSymbol('Singleton')
        cls.add_child(FunctionSymbol('Singleton', visibility=Visibility.PRIVATE))
        cls.add_child(FunctionSymbol('Instance', 'Singleton &', is_static=True))
        ctor_set = collect_overload_sets(cls)['Singleton']
        assert ctor_set.candidates == []
        assert ctor_set.needs_selector

    def test_destructor_is_excluded(self, transform):
        assert '~Transform' not in collect_overload_sets(transform)


class TestDispatch:
    def test_dispatch_table_in_declaration_order(self, vector3):
        table = collect_overload_sets(vector3)['Vector3'].dispatch_table()
        assert [(e.arity, e.wrapper_name) for e in table] == [
            (0, 'Vector3_Vector3'), (3, 'Vector3_Vector3_afloat_afloat_afloat')]

    def test_resolve_by_arity(self, vector3):
        ctor_set = collect_overload_sets(vector3)['Vector3']
        assert ctor_set.resolve([]).wrapper_name == 'Vector3_Vector3'
        assert ctor_set.resolve(['float', 'float', 'float']).wrapper_name == 'Vector3_Vector3_afloat_afloat_afloat'

    def test_resolve_by_type(self, transform):
        set_pos = collect_overload_sets(transform)['SetPos']
        assert set_pos.resolve(['Vector3']).wrapper_name == 'Transform_SetPos_aVector3'

    def test_resolve_no_match(self, vector3):
        assert collect_overload_sets(vector3)['Vector3'].resolve(['float']) is None

    def test_first_match_wins(self):
        cls = ClassSymbol('C')
        first = cls.add_child(FunctionSymbol('f', 'void', parameters=[Parameter('a', 'int')]))
        cls.add_child(FunctionSymbol('f', 'void', parameters=[Parameter('a', 'const int &')], is_const=True))
        assert collect_overload_sets(cls)['f'].resolve(['int']).function is first

    def test_entry_matches(self):
        cls = ClassSymbol('C')
        entry = DispatchEntry(cls.add_child(FunctionSymbol('f', 'void', parameters=[Parameter('a', 'const QString &')])))
        assert entry.wrapper_name == 'C_f_aQString'
        assert entry.matches(['QString'])
        assert not entry.matches(['QString', 'int'])


class TestSelectorGenerator:
    def test_constructor_selector(self, vector3):
        writer = CodeWriter()
        SelectorGenerator().generate(collect_overload_sets(vector3)['Vector3'], writer)
        assert writer.output() == (
            'static QScriptValue Vector3_Vector3_selector(QScriptContext *context, QScriptEngine *engine)\n'
            '{\n'
            '    if (context->argumentCount() == 0)\n'
            '        return Vector3_Vector3(context, engine);\n'
            '    if (context->argumentCount() == 3 && QSVIsOfType<float>(context->argument(0)) && '
            'QSVIsOfType<float>(context->argument(1)) && QSVIsOfType<float>(context->argument(2)))\n'
            '        return Vector3_Vector3_afloat_afloat_afloat(context, engine);\n'
            '    return ReportInvocationError(context, InvocationError(QString("Vector3_Vector3_selector failed to choose the '
            'right function to call! Did you use \'var x = Vector3();\' instead of \'var x = new Vector3();\'?"), '
            'context->backtrace()));\n'
            '}\n'
            '\n'
        )

    def test_method_selector_has_no_new_hint(self, transform):
        writer = CodeWriter()
        SelectorGenerator().generate(collect_overload_sets(transform)['SetPos'], writer)
        text = writer.output()
        assert 'static QScriptValue Transform_SetPos_selector(' in text
        assert 'QSVIsOfType<Vector3>(context->argument(0))' in text
        assert 'Transform_SetPos_selector failed to choose the right function to call!"' in text
        assert 'new Transform' not in text

    def test_no_selector_for_single_method(self, vector3):
        writer = CodeWriter()
        SelectorGenerator().generate(collect_overload_sets(vector3)['Length'], writer)
        assert writer.output() == '\n'

    def test_empty_constructor_selector_always_fails(self):
        cls = ClassSymbol('Buf')
        cls.add_child(FunctionSymbol('Buf', parameters=[Parameter('data', 'char *')]))
        writer = CodeWriter()
        SelectorGenerator().generate(collect_overload_sets(cls)['Buf'], writer)
        text = writer.output()
        assert 'if (' not in text
        assert 'Buf_Buf_selector failed to choose' in text


class TestWrappedFunctions:
    def test_declared_functions(self, vector3):
        functions = wrapped_functions(vector3, collect_overload_sets(vector3))
        assert [wrapper_name(f) for f in functions] == [
            'Vector3_Vector3', 'Vector3_Vector3_afloat_afloat_afloat', 'Vector3_Length_const', 'Vector3_Normalize',
            'Vector3_Dot_aVector3_aVector3']

    def test_implicit_constructor_first(self, filtered):
        functions = wrapped_functions(filtered, collect_overload_sets(filtered))
        assert [wrapper_name(f) for f in functions] == ['Filtered_Filtered', 'Filtered_Get_const']

    def test_scriptable_functions_skip_operators(self, transform):
        assert 'operator==' not in [f.name for f in scriptable_functions(transform)]

    def test_implicit_default_constructor_is_detached(self, plain):
        ctor = implicit_default_constructor(plain)
        assert ctor.parent is plain
        assert ctor not in plain.children
        assert ctor.qualified_name == 'Plain::Plain'
