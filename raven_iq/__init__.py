"""
Raven-IQ: Progressive Matrices Puzzle Exam

Procedurally generated Raven's-Progressive-Matrices-style puzzles with a
synthetic IQ scoring model and locally persisted player progress.

Main Components:
- core: Shape/pattern value model, puzzle and result types, level tables
- generate: Template catalogue and the matrix puzzle generator
- evaluate: IQ formulas, session metrics and the level session runner
- data: Stored progress record and JSON progress store

Quick Start:
    from raven_iq.generate import MatrixPuzzleGenerator
    from raven_iq.evaluate import LevelSession

    generator = MatrixPuzzleGenerator(seed=7)
    session = LevelSession(1, generator=generator)
    puzzle = session.current_puzzle()
    result = session.submit_answer(puzzle.correct_answer_index)
"""
