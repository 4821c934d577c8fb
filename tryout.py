from calculator.evaluator import EvaluationError, evaluate
from calculator.repl import format_result
from calculator.tokenizer import InvalidNumber, tokenize, untokenize

for code in [
    "5",
    "-1",
    "1 + 1",
    "-1 + 1",
    "1 + -1",
    "4 + 6 * 3",
    "(4 + 6)",
    "(4+6) * 3",
    "80225/+2",
    "7/6/2000",
    "5^2",
    "2^3^2",
    "8 - 4 - 2",
    "3--2",
    "(1 + 14 * (54^2))",
    "10 / 5/ 2",
    "1 / 0",
    "(-8)^0.5",
    "--3",
    "(1 + 2",
    "3 % 2",
    "3 4",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        tokens = tokenize(code)
    except InvalidNumber as e:
        print(e)
        continue

    print(f"tokens: {' '.join(str(t) for t in tokens)}")
    print(f"untokenized: {untokenize(tokens)}")

    try:
        result = evaluate(tokens)
    except EvaluationError as e:
        print(e)
        continue
    print(f"result: {format_result(result)} ({result!r})")
