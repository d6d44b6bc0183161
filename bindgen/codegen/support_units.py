"""
Units shared by all generated classes: the helpers header every unit includes,
and a registration unit that exposes a batch of generated classes at once.
"""

from typing import Iterable

from .code_writer import CodeWriter
from .prototype import registration_function_name

REGISTRATION_ENTRY_POINT = 'ExposeGeneratedBindings'


class SupportUnitGenerator:
    """Generates the helpers header and the batch registration unit"""

    def generate_helpers_header(self, writer: CodeWriter):
        writer.lines(
            '#pragma once',
            '',
            '#include <QScriptContext>',
            '#include <QScriptEngine>',
            '#include <QScriptValue>',
            '#include <QStringList>',
            '#include <QVariant>',
            '#include <cstdio>',
            '',
            '/// Failure of a generated wrapper: what went wrong and the script call stack at that point.',
            'struct InvocationError',
            '{',
        )
        writer.indent()
        writer.lines(
            'InvocationError(const QString &message_, const QStringList &callStack_ = QStringList())',
            ':message(message_), callStack(callStack_) {}',
            'QString message;',
            'QStringList callStack;',
        )
        writer.dedent()
        writer.lines('};', '')

        writer.line('/// Surfaces an InvocationError and yields the value the wrapper returns to the script.')
        with writer.block('inline QScriptValue ReportInvocationError(QScriptContext *context, const InvocationError &error)'):
            writer.line('Q_UNUSED(context);')
            writer.line('fprintf(stderr, "%s\\n", error.message.toStdString().c_str());')
            writer.line('for (int i = 0; i < error.callStack.size(); ++i)')
            writer.indent()
            writer.line('fprintf(stderr, "    %s\\n", error.callStack[i].toStdString().c_str());')
            writer.dedent()
            writer.line('return QScriptValue();')

        writer.line('/// Runtime type test used by overload selectors.')
        writer.line('template<typename T>')
        with writer.block('bool QSVIsOfType(const QScriptValue &value)'):
            writer.line('// Generated classes carry their metatype id on the prototype.')
            writer.line('QScriptValue id = value.property("metaTypeId");')
            writer.line('if (id.isValid() && !id.isUndefined())')
            writer.indent()
            writer.line('return id.toInt32() == qMetaTypeId<T>();')
            writer.dedent()
            writer.line('return value.toVariant().canConvert<T>();')

    def generate_registration_unit(self, class_names: Iterable[str], helpers_include: str, writer: CodeWriter):
        class_names = list(class_names)
        writer.line(f'#include "{helpers_include}"')
        writer.line()
        for name in class_names:
            writer.line(f'QScriptValue {registration_function_name(name)}(QScriptEngine *engine);')
        if class_names:
            writer.line()
        with writer.block(f'void {REGISTRATION_ENTRY_POINT}(QScriptEngine *engine)'):
            if not class_names:
                writer.line('Q_UNUSED(engine);')
            for name in class_names:
                writer.line(f'{registration_function_name(name)}(engine);')
