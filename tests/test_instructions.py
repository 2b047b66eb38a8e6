"""
Tests for the LLVM IR reader and instruction classifier.
"""

import pytest
import os
import shutil
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ccmetrics.errors import FrontEndError
from ccmetrics.ir import (
    NO_ROWS_MESSAGE,
    Category,
    IRFunction,
    Instruction,
    classify_function,
    classify_module,
    format_instruction_table,
    load_module,
    read_module,
)

MODULE = """\
; ModuleID = 'sample.c'
source_filename = "sample.c"

@.str = private unnamed_addr constant [4 x i8] c"One\\00", align 1

; Function Attrs: noinline nounwind optnone uwtable
define dso_local i32 @gcd(i32 noundef %0, i32 noundef %1) #0 {
  %3 = alloca i32, align 4
  %4 = alloca i32, align 4
  store i32 %0, ptr %3, align 4
  store i32 %1, ptr %4, align 4
  br label %5

5:                                                ; preds = %8, %2
  %6 = load i32, ptr %4, align 4
  %7 = icmp ne i32 %6, 0
  br i1 %7, label %8, label %12

8:                                                ; preds = %5
  %9 = load i32, ptr %3, align 4
  %10 = srem i32 %9, %6
  %11 = shl i32 %10, 1
  br label %5

12:                                               ; preds = %5
  ret i32 %9
}

define dso_local void @pick(i32 noundef %0) #0 {
  switch i32 %0, label %3 [
    i32 1, label %2
    i32 2, label %2
  ]

2:
  %call = tail call i32 (ptr, ...) @printf(ptr noundef @.str)
  br label %3

3:
  ret void
}

declare i32 @printf(ptr noundef, ...) #1

define void @"quoted name"() {
  unreachable
}
"""


class TestIRReader:
    """Tests for reading textual IR."""

    def test_functions_in_module_order(self):
        """Test that definitions and declarations keep module order."""
        functions = read_module(MODULE)
        assert [f.name for f in functions] == ["gcd", "pick", "printf", "quoted name"]
        assert functions[2].is_declaration

    def test_opcodes(self):
        """Test opcode extraction with assignments and labels."""
        gcd = read_module(MODULE)[0]
        assert [i.opcode for i in gcd.instructions] == [
            "alloca", "alloca", "store", "store", "br",
            "load", "icmp", "br",
            "load", "srem", "shl", "br",
            "ret",
        ]

    def test_operands(self):
        """Test top-level operand splitting."""
        gcd = read_module(MODULE)[0]
        assert gcd.instructions[2] == Instruction("store", ("i32 %0", "ptr %3", "align 4"))

    def test_multiline_switch(self):
        """Test that a switch's case list is one instruction."""
        pick = read_module(MODULE)[1]
        assert [i.opcode for i in pick.instructions] == ["switch", "call", "br", "ret"]
        assert "i32 2" in pick.instructions[0].operands[-1]

    def test_invoke_continuation(self):
        """Test that invoke targets continue the invoke."""
        text = (
            "define void @f() personality ptr @p {\n"
            "  invoke void @g()\n"
            "          to label %1 unwind label %2\n"
            "1:\n"
            "  ret void\n"
            "2:\n"
            "  %3 = landingpad { ptr, i32 }\n"
            "          cleanup\n"
            "  resume { ptr, i32 } %3\n"
            "}\n"
        )
        f = read_module(text)[0]
        assert [i.opcode for i in f.instructions] == ["invoke", "ret", "landingpad", "resume"]
        assert f.instructions[0].operands[-1] == "to label %1 unwind label %2"


class TestClassifier:
    """Tests for the fixed opcode table."""

    def test_classify_function(self):
        """Test per-category counts."""
        counts = classify_function(read_module(MODULE)[0])

        assert counts[Category.ARITHMETIC] == 1
        assert counts[Category.LOGICAL] == 1
        assert counts[Category.COMPARISON] == 1
        assert counts[Category.MEMORY] == 6
        assert counts[Category.CONTROL_FLOW] == 3
        assert counts[Category.CALL] == 1

    def test_unlisted_opcodes_not_counted(self):
        """Test that opcodes outside the table are ignored."""
        counts = classify_function(IRFunction("f", [Instruction("unreachable"), Instruction("fneg")]))
        assert counts.is_zero


class TestInstructionTable:
    """Tests for the fixed-width instruction table."""

    header = (
        "  Function Name |      Arithmetic |         Logical |      Comparison |"
        "          Memory |    Control Flow |   Function Call"
    )
    separator = " | ".join(["-" * 15] * 7)

    def test_table(self):
        """Test header, separator and omission of all-zero functions."""
        table = format_instruction_table(classify_module(read_module(MODULE)))
        lines = table.splitlines()

        assert lines[0] == self.header
        assert lines[1] == self.separator
        assert lines[2] == " | ".join(f"{cell:>15}" for cell in ["gcd", 1, 1, 1, 6, 3, 1])
        assert lines[3].split()[0] == "pick"
        assert len(lines) == 4

    def test_sentinel_when_nothing_qualifies(self):
        """Test the sentinel line for empty or all-zero modules."""
        for functions in ([], [IRFunction("f")]):
            lines = format_instruction_table(classify_module(functions)).splitlines()
            assert lines == [self.header, self.separator, NO_ROWS_MESSAGE]


class TestIRFrontEnd:
    """Tests for loading IR from files."""

    def test_load_ll_file(self, tmp_path):
        """Test that .ll files are read directly."""
        path = tmp_path / "sample.ll"
        path.write_text(MODULE)
        assert [f.name for f in load_module(str(path))][:2] == ["gcd", "pick"]

    def test_compiler_failure(self, tmp_path):
        """Test that a failing compiler is a front-end failure."""
        path = tmp_path / "sample.c"
        path.write_text("int main(void) { return 0; }\n")
        with pytest.raises(FrontEndError):
            load_module(str(path), clang=str(tmp_path / "no-such-clang"))

    @pytest.mark.skipif(shutil.which("clang") is None, reason="clang not installed")
    def test_compile_with_clang(self, tmp_path):
        """Test classification of a compiled C file."""
        path = tmp_path / "add.c"
        path.write_text("int add(int a, int b) { return a + b; }\n")

        counts = classify_module(load_module(str(path)))

        assert [c.function for c in counts] == ["add"]
        assert counts[0][Category.ARITHMETIC] == 1
        assert counts[0][Category.CALL] == 1
