from owl.evaluation.evaluator import Evaluator, eval_source

__all__ = ["Evaluator", "eval_source"]
