"""Day 17: a three-bit computer and the program that prints itself."""

import enum
import re
from dataclasses import dataclass, field

_REGISTER_RE = re.compile(r"Register .: (\d+)")
_FIRST_SET_LIMIT = 0b11_1111_1111


class Register(enum.Enum):
    """One of the computer's three registers."""

    A = "A"
    B = "B"
    C = "C"


class Instruction(enum.IntEnum):
    """The eight opcodes of the computer."""

    ADV = 0
    BXL = 1
    BST = 2
    JNZ = 3
    BXC = 4
    OUT = 5
    BDV = 6
    CDV = 7

    @property
    def uses_combo_operand(self):
        """True if the operand is decoded as a combo operand."""
        return self in _COMBO_INSTRUCTIONS


_COMBO_INSTRUCTIONS = frozenset(
    {Instruction.ADV, Instruction.BST, Instruction.OUT, Instruction.BDV, Instruction.CDV}
)

_DIV_TARGETS = {
    Instruction.ADV: Register.A,
    Instruction.BDV: Register.B,
    Instruction.CDV: Register.C,
}

_COMBO_REGISTERS = {4: Register.A, 5: Register.B, 6: Register.C}


def _decode_combo(value):
    if 0 <= value <= 3:
        return value
    if value in _COMBO_REGISTERS:
        return _COMBO_REGISTERS[value]
    raise ValueError(f"Invalid combo operand value: {value}")


def _decode(opcode, operand):
    try:
        instruction = Instruction(opcode)
    except ValueError:
        raise ValueError(f"Invalid instruction value {opcode}") from None
    if instruction.uses_combo_operand:
        return instruction, _decode_combo(operand)
    return instruction, operand


@dataclass(frozen=True)
class Rom:
    """Initial register values and the program."""

    reg_a: int
    reg_b: int
    reg_c: int
    program: tuple


@dataclass
class Emulator:
    """The running state of the computer."""

    reg_a: int
    reg_b: int
    reg_c: int
    program: tuple
    pc: int = 0
    output: list = field(default_factory=list)

    @classmethod
    def from_rom(cls, rom):
        """A fresh emulator loaded with a ROM."""
        return cls(reg_a=rom.reg_a, reg_b=rom.reg_b, reg_c=rom.reg_c, program=tuple(rom.program))

    def run(self):
        """Run until the program counter leaves the program; return the output."""
        while self.pc < len(self.program):
            instruction, operand = self._read_instruction()
            self.pc += 2
            self._execute(instruction, operand)
        return list(self.output)

    def _read_instruction(self):
        if self.pc + 1 >= len(self.program):
            raise ValueError(f"Missing operand at position {self.pc + 1}")
        return _decode(self.program[self.pc], self.program[self.pc + 1])

    def _register(self, register):
        return {Register.A: self.reg_a, Register.B: self.reg_b, Register.C: self.reg_c}[register]

    def _set_register(self, register, value):
        if register is Register.A:
            self.reg_a = value
        elif register is Register.B:
            self.reg_b = value
        else:
            self.reg_c = value

    def _value(self, combo):
        if isinstance(combo, Register):
            return self._register(combo)
        return combo

    def _execute(self, instruction, operand):
        if instruction in _DIV_TARGETS:
            self._set_register(_DIV_TARGETS[instruction], self.reg_a >> self._value(operand))
        elif instruction is Instruction.BXL:
            self.reg_b ^= operand
        elif instruction is Instruction.BST:
            self.reg_b = self._value(operand) % 8
        elif instruction is Instruction.JNZ:
            if self.reg_a != 0:
                self.pc = operand
        elif instruction is Instruction.BXC:
            self.reg_b ^= self.reg_c
        else:
            self.output.append(self._value(operand) % 8)


def _parse_register(line):
    match = _REGISTER_RE.search(line)
    if match is None:
        raise ValueError("Invalid register input")
    return int(match.group(1))


def _parse_program(block):
    tokens = block.replace("Program: ", "").strip().split(",")
    values = []
    for token in tokens:
        if not token.isdigit() or int(token) > 255:
            raise ValueError(f"Invalid program value: {token!r}")
        values.append(int(token))
    return tuple(values)


def parse_input(text):
    """Parse the register block and the program line into a ROM."""
    blocks = text.replace("\r\n", "\n").split("\n\n")
    if len(blocks) != 2:
        raise ValueError("expected 2 blocks")
    register_block, program_block = blocks
    values = [_parse_register(line) for line in register_block.splitlines()]
    if len(values) < 3:
        raise ValueError("expected 3 registers")
    reg_a, reg_b, reg_c = values[:3]
    return Rom(reg_a=reg_a, reg_b=reg_b, reg_c=reg_c, program=_parse_program(program_block))


def compute_single_output_value(a):
    """The value the puzzle program prints for a given register A."""
    shift = (a % 8) ^ 1
    return (((a % 8) ^ 1) ^ (a >> shift) ^ 4) % 8


def does_generate_output(a, values):
    """True if starting with register A the program prints these values first."""
    current = a
    for value in values:
        if compute_single_output_value(current) != value:
            return False
        current //= 8
    return True


def _first_set_of_numbers(last_value):
    return [a for a in range(_FIRST_SET_LIMIT + 1) if compute_single_output_value(a) == last_value]


def _extend_candidates(start_values, remaining_outputs):
    candidates = list(start_values)
    for target in reversed(remaining_outputs):
        candidates = [
            value
            for base in candidates
            for value in range(base << 3, (base << 3) + 8)
            if compute_single_output_value(value) == target
        ]
    return candidates


def _filter_candidate(candidates, output):
    for value in sorted(candidates):
        if does_generate_output(value, output):
            return value
    raise ValueError("no result found")


def part_1(text):
    """The program's output, joined by commas."""
    return ",".join(str(value) for value in Emulator.from_rom(parse_input(text)).run())


def part_2(text):
    """The lowest register A for which the program prints itself."""
    program = parse_input(text).program
    if not program:
        raise ValueError("Program is empty")
    start_values = _first_set_of_numbers(program[-1])
    candidates = _extend_candidates(start_values, program[:-1])
    return _filter_candidate(candidates, program)