"""主程序入口 - 科学计算器表达式求值"""
import argparse
import logging
import sys
import pandas as pd

from config.config import *
from core import AngleMode, EvaluationError
from session import CalculatorSession, MEMORY_KEYS
from data.expression_loader import load_expressions, evaluate_expressions, save_results

# 设置日志
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  <expression>      evaluate, e.g. 2+3*4, sin(90), fact(5)
  m+ m- mc mr       memory register (m+/m- use the last result)
  history           show history (most recent first)
  recall <n>        evaluate history entry n again
  clear             clear history
  deg / rad         switch angle mode
  quit              exit"""


def run_interactive(session, input_func=None, output_func=None):
    """交互模式：每行一个表达式或命令"""
    input_func = input_func or input
    output_func = output_func or print
    display = ""
    output_func(f"Angle mode: {session.angle_mode.value}. Type 'help' for commands.")

    while True:
        try:
            line = input_func("> ").strip()
        except EOFError:
            break

        if not line:
            continue
        if line in ('quit', 'exit'):
            break
        if line == 'help':
            output_func(HELP_TEXT)
            continue
        if line in ('deg', 'rad'):
            session.angle_mode = AngleMode.DEGREE if line == 'deg' else AngleMode.RADIAN
            output_func(f"Angle mode: {session.angle_mode.value}")
            continue
        if line in MEMORY_KEYS:
            recalled = session.memory_key(line, display)
            if recalled is not None:
                display = repr(recalled)
                output_func(display)
            continue
        if line == 'history':
            for i, entry in enumerate(session.history):
                output_func(f"{i}: {entry['expression']} = {entry['result']}")
            continue
        if line == 'clear':
            session.history.clear()
            continue
        if line.startswith('recall'):
            try:
                line = session.recall_history(int(line.split()[1]))
            except (IndexError, ValueError) as e:
                output_func(f"Error: {e}")
                continue

        outcome = session.submit(line)
        display = outcome.error if outcome.error is not None else repr(outcome.value)
        output_func(display)

    return session


def main(args):
    angle_mode = AngleMode.coerce(args.angle_mode)
    session = CalculatorSession(
        angle_mode=angle_mode,
        history_size=SESSION_CONFIG['history_size'],
        cache_size=SESSION_CONFIG['cache_size'],
        allow_partial=args.allow_partial or CALCULATOR_CONFIG['allow_partial']
    )
    logger.info(f"Starting calculator (angle mode: {angle_mode.value})")

    status = 0

    # 批量模式
    if args.input_path:
        expressions = load_expressions(args.input_path, args.expression_column)
        results = evaluate_expressions(expressions, session=session)
        for _, row in results.iterrows():
            if pd.isna(row['error']):
                print(f"{row['expression']} = {row['result']!r}")
            else:
                print(f"{row['expression']}: {row['error']}")
        if args.save_results:
            save_results(results, args.output_path or BATCH_CONFIG['default_output_path'])
        if not results['error'].isna().all():
            status = 1

    # 单次求值
    if args.expression:
        for expression in args.expression:
            try:
                print(repr(session.evaluate(expression)))
            except EvaluationError as e:
                logger.error(f"Error evaluating '{expression}': {e.message}")
                print(f"Error: {e.message}")
                status = 1

    # 没有输入时默认进入交互模式；--interactive 在批量/单次求值之后继续同一会话
    if args.interactive or not (args.input_path or args.expression):
        run_interactive(session)
    return status


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Scientific calculator expression evaluator")

    parser.add_argument(
        "--expression",
        type=str,
        action="append",
        help="Expression to evaluate (can be given multiple times)"
    )
    parser.add_argument(
        "--input_path",
        type=str,
        default=None,
        help="Path to a CSV or text file of expressions"
    )
    parser.add_argument(
        "--expression_column",
        type=str,
        default=BATCH_CONFIG['expression_column'],
        help="Name of the expression column in a CSV input"
    )
    parser.add_argument(
        "--angle_mode",
        type=str,
        choices=["radian", "degree"],
        default=CALCULATOR_CONFIG['default_angle_mode'],
        help="Angle mode for trigonometric functions"
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Start the interactive loop (after any --expression/--input_path evaluation)"
    )
    parser.add_argument(
        "--allow_partial",
        action="store_true",
        help="Return the bottom of the stack instead of failing when operands are left over"
    )
    parser.add_argument(
        "--save_results",
        action="store_true",
        help="Save batch results to a CSV file"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=BATCH_CONFIG['default_output_path'],
        help="Path to save batch results"
    )
    args = parser.parse_args()
    sys.exit(main(args))
