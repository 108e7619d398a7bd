import logging


def format_info(depth, score, nodes, elapsed, move, winning_value):
    """One-line summary of a finished search; ELAPSED is in milliseconds."""
    nps = int(nodes * 1000 / elapsed) if elapsed > 0 else 0

    if abs(score) >= winning_value:
        plies = depth - (abs(score) - winning_value)
        score_str = f"red {plies}" if score > 0 else f"blue {plies}"
    else:
        score_str = f"value {score}"

    return f"depth {depth} score {score_str} nodes {nodes} nps {nps} time {int(elapsed)} move {move if move else '-'}"


def configure_logging(level="INFO"):
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
