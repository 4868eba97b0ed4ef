"""
Static chess question catalog.

Ids are unique and stable: they are stored in ``quiz_history`` and
``user_quiz`` rows, so never renumber an existing entry.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class QuizQuestion:
    id: int
    question: str
    answer: str
    aliases: tuple[str, ...] = ()
    reward: int = 10

    @property
    def accepted_answers(self) -> tuple[str, ...]:
        return (self.answer,) + self.aliases


Q = QuizQuestion

QUIZ_POOL: tuple[QuizQuestion, ...] = (
    Q(1, "How many squares are on a chessboard?", "64", reward=5),
    Q(2, "Which piece moves in an L-shape?", "Knight", aliases=("horse",), reward=10),
    Q(3, "What is the term for attacking the king?", "Check", reward=10),
    Q(4, "What is the final aim of chess?", "Checkmate", aliases=("mate",), reward=15),
    Q(5, "Which move lets king and rook move together?", "Castling", aliases=("castle",), reward=15),
    Q(6, "Which color moves first?", "White", reward=5),
    Q(7, "Which piece moves any number of squares diagonally?", "Bishop", reward=10),
    Q(8, "Which piece combines rook and bishop movement?", "Queen", reward=15),
    Q(9, "Which piece moves forward and captures diagonally?", "Pawn", reward=10),
    Q(10, "What is the special pawn capture immediately after a two-step move called?", "En passant", aliases=("enpassant", "en passant capture"), reward=15),
    Q(11, "What is promoting a pawn to a queen called?", "Promotion", aliases=("pawn promotion",), reward=10),
    Q(12, "Name the opening starting with 1. e4 e5 2. Nf3 Nc6 3. Bb5.", "Ruy Lopez", aliases=("spanish",), reward=15),
    Q(13, "Name the opening 1. d4 Nf6 2. c4 g6.", "Indian Defense", aliases=("kings indian", "queen's indian"), reward=15),
    Q(14, "What is a draw due to a repeated position three times called?", "Threefold repetition", aliases=("threefold",), reward=15),
    Q(15, "What is a draw when no legal moves and king is not in check?", "Stalemate", reward=15),
    Q(16, "What is the 50-move rule based on?", "No pawn move or capture", aliases=("fifty move rule",), reward=15),
    Q(17, "What does FIDE stand for?", "International Chess Federation", aliases=("fide",), reward=10),
    Q(18, "Who is known as the 'Mozart of chess'?", "Magnus Carlsen", aliases=("carlsen",), reward=10),
    Q(19, "Who wrote 'My System'?", "Aron Nimzowitsch", aliases=("nimzowitsch",), reward=15),
    Q(20, "Which opening starts with 1. e4 c5?", "Sicilian Defense", aliases=("sicilian",), reward=15),
    Q(21, "Which opening starts with 1. d4 d5 2. c4?", "Queen's Gambit", aliases=("queens gambit",), reward=15),
    Q(22, "Name the tactic: a move that creates two simultaneous threats.", "Fork", reward=10),
    Q(23, "Name the tactic: blocking a square to cut off defense.", "Interference", reward=10),
    Q(24, "Name the tactic: sacrificing material to open lines.", "Sacrifice", reward=10),
    Q(25, "Name the tactic: winning material by trapping a piece.", "Trap", reward=10),
    Q(26, "Name the tactic: attacking the king with a forcing move.", "Check", reward=5),
    Q(27, "Name the tactic: pinning a piece to a more valuable one.", "Pin", reward=10),
    Q(28, "Name the tactic: a piece behind another is attacked after the front moves.", "Skewer", reward=10),
    Q(29, "Name the tactic: decoying a piece onto a bad square.", "Decoy", reward=10),
    Q(30, "Name the tactic: removing the guard of a piece.", "Deflection", aliases=("remove the guard",), reward=10),
    Q(31, "Which endgame is drawn with only king vs king?", "King vs King", aliases=("bare kings",), reward=5),
    Q(32, "What is opposition in king and pawn endgames?", "Kings facing each other with a square in between", aliases=("opposition",), reward=15),
    Q(33, "What is zugzwang?", "Being forced to move to a worse position", reward=15),
    Q(34, "Which piece is worth about 9 points?", "Queen", reward=5),
    Q(35, "Which piece is worth about 5 points?", "Rook", reward=5),
    Q(36, "Which piece is worth about 3 points (two types)?", "Knight and Bishop", aliases=("minor pieces",), reward=10),
    Q(37, "What is the term for two bishops on adjacent diagonals", "Bishop pair", aliases=("two bishops",), reward=10),
    Q(38, "What is a fianchetto?", "Developing bishop to b2/g2/b7/g7", reward=10),
    Q(39, "Name the tactic: discovered attack on a piece or king.", "Discovered attack", reward=10),
    Q(40, "Name the tactic: discovered check.", "Discovered check", reward=10),
    Q(41, "What is a double attack?", "Two threats at once", reward=10),
    Q(42, "What is perpetual check?", "Repeated checks forcing a draw", reward=15),
    Q(43, "What is a passed pawn?", "Pawn with no opposing pawns blocking its path", reward=10),
    Q(44, "What is an isolated pawn?", "Pawn with no same-color pawns on adjacent files", reward=10),
    Q(45, "What is a backward pawn?", "Pawn behind others and cannot advance safely", reward=10),
    Q(46, "What is a doubled pawn?", "Two pawns on same file", reward=10),
    Q(47, "What is a gambit?", "Sacrificing material for initiative", reward=10),
    Q(48, "Name the opening: 1. e4 e5 2. Nf3 Nc6 3. Bc4.", "Italian Game", aliases=("giuoco piano",), reward=15),
    Q(49, "Name the opening: 1. e4 e5 2. Nf3 d6.", "Philidor Defense", aliases=("philidor",), reward=15),
    Q(50, "Name the opening: 1. e4 e5 2. f4.", "King's Gambit", aliases=("kings gambit",), reward=15),
    Q(51, "Name the opening: 1. d4 d5 2. Nf3 Nf6 3. c4.", "Queen's Gambit Declined", aliases=("qgd",), reward=15),
    Q(52, "Name the opening: 1. d4 f5.", "Dutch Defense", aliases=("dutch",), reward=15),
    Q(53, "Name the opening: 1. e4 e6.", "French Defense", aliases=("french",), reward=15),
    Q(54, "Name the opening: 1. e4 d6.", "Pirc Defense", aliases=("pirc",), reward=15),
    Q(55, "Name the opening: 1. e4 c6.", "Caro-Kann Defense", aliases=("caro kann",), reward=15),
    Q(56, "Name the opening: 1. e4 d5.", "Scandinavian Defense", aliases=("center counter",), reward=15),
    Q(57, "Name the opening: 1. e4 b6.", "Owen's Defense", aliases=("owens",), reward=15),
    Q(58, "Name the opening: 1. e4 g6.", "Modern Defense", aliases=("modern",), reward=15),
    Q(59, "Name the opening: 1. d4 Nf6 2. c4 e6.", "Nimzo-Indian Defense", aliases=("nimzo indian",), reward=15),
    Q(60, "Name the opening: 1. d4 Nf6 2. c4 g6 3. Nc3 Bg7.", "King's Indian Defense", aliases=("kings indian",), reward=15),
    Q(61, "Name the opening: 1. d4 d5 2. c4 c6.", "Slav Defense", aliases=("slav",), reward=15),
    Q(62, "Name the opening: 1. d4 d5 2. c4 e6.", "Queen's Gambit Declined", aliases=("qgd",), reward=15),
    Q(63, "Name the opening: 1. c4.", "English Opening", aliases=("english",), reward=15),
    Q(64, "Name the opening: 1. Nf3.", "Reti Opening", aliases=("reti",), reward=15),
    Q(65, "Name the opening: 1. b3.", "Larsen's Opening", aliases=("nimzo larsen",), reward=15),
    Q(66, "Name the opening: 1. g3.", "Hungarian Opening", aliases=("kings fianchetto",), reward=10),
    Q(67, "Which checkmate uses two rooks to trap the king on a rank or file?", "Ladder mate", aliases=("rook roller",), reward=15),
    Q(68, "Which checkmate uses queen and bishop on h7/h2?", "Scholar's mate", aliases=("scholars",), reward=10),
    Q(69, "Which checkmate pattern uses back rank weakness?", "Back rank mate", reward=10),
    Q(70, "Which mate involves bishop and knight coordinating?", "Bishop and knight mate", reward=15),
    Q(71, "Which mate involves smothered king with a knight?", "Smothered mate", reward=15),
    Q(72, "Which mate involves sacrifice on h7 followed by Ng5/Qh5?", "Greek gift", aliases=("greek gift sacrifice",), reward=15),
    Q(73, "What is a blockade?", "Placing a piece to stop an enemy pawn advance", reward=10),
    Q(74, "What is prophylaxis?", "Preventing opponent's plan", reward=10),
    Q(75, "What is tempo?", "A unit of time for a move advantage", reward=10),
    Q(76, "What is initiative?", "Ability to make threats forcing responses", reward=10),
    Q(77, "What is a zwischenzug?", "An in-between move", aliases=("in-between",), reward=15),
    Q(78, "What is a battery?", "Two pieces lined up on a file, rank, or diagonal", reward=10),
    Q(79, "What is a majority attack with pawns?", "Pawn majority push", reward=10),
    Q(80, "What is the square of the pawn rule?", "King reaches square if inside pawn's square", reward=15),
    Q(81, "What is triangulation in endgames?", "Wasting moves to gain opposition", reward=15),
    Q(82, "What is underpromotion?", "Promoting to a piece other than queen", reward=15),
    Q(83, "What is stalemate tactic for a draw?", "Forcing no legal move without check", reward=15),
    Q(84, "What is the main idea of the London System?", "Setup with d4, Nf3, Bf4, e3, c3", aliases=("london system",), reward=15),
    Q(85, "Which opening starts with 1. d4 and Bf4 early?", "London System", aliases=("london",), reward=15),
    Q(86, "Who was the first official World Chess Champion?", "Wilhelm Steinitz", aliases=("steinitz",), reward=10),
    Q(87, "Who defeated Kasparov in 2000 to become World Champion?", "Vladimir Kramnik", aliases=("kramnik",), reward=10),
    Q(88, "What is castling long?", "Castling queenside", aliases=("queenside castling", "o-o-o"), reward=10),
    Q(89, "What is castling short?", "Castling kingside", aliases=("kingside castling", "o-o"), reward=10),
    Q(90, "What is the en passant condition?", "Capture only immediately after a two-step pawn move", reward=15),
    Q(91, "What does ELO measure?", "Player rating strength", aliases=("elo rating",), reward=10),
    Q(92, "What is the term for a line starting with a12? (illegal)", "Illegal move", reward=5),
    Q(93, "What is algebraic notation for checkmate?", "#", aliases=("hash",), reward=5),
    Q(94, "What is algebraic notation for check?", "+", aliases=("plus",), reward=5),
    Q(95, "What is the term for moving the same piece twice in the opening unnecessarily?", "Loss of tempo", reward=10),
    Q(96, "What is the doel of development?", "Activate pieces quickly", aliases=("development",), reward=10),
    Q(97, "Where should you usually place rooks?", "Open files", reward=10),
    Q(98, "What is a half-open file?", "File with no pawn of one side", reward=10),
    Q(99, "What is the center in chess?", "Squares e4, d4, e5, d5", reward=10),
    Q(100, "What is a checkmate with queen and king called?", "Basic mate", aliases=("queen mate",), reward=10),
    Q(101, "What is a checkmate with rook and king called?", "Rook mate", reward=10),
    Q(102, "What is the tactic of sacrificing an exchange called?", "Exchange sacrifice", aliases=("sacrifice exchange",), reward=15),
    Q(103, "What is the tactic of doubling rooks on a file?", "Rook battery", reward=10),
    Q(104, "What is the tactic of opening a diagonal for a bishop?", "Pawn break", reward=10),
    Q(105, "Name the tactic: quiet move setting up a tactic next move.", "Quiet move", reward=10),
    Q(106, "What are connected passed pawns?", "Adjacent passed pawns", reward=10),
    Q(107, "What is a king's shelter of pawns called?", "Pawn shield", reward=10),
    Q(108, "Name the mate using queen sacrifice then smothered mate.", "Levien/Philidor combination", aliases=("queen sac smothered",), reward=15),
    Q(109, "Name the mate pattern where queen mates on back rank with rook block.", "Back rank mate", reward=10),
    Q(110, "What is an outpost?", "Strong square for knight or piece, hard to chase away", reward=10),
    Q(111, "What is a hole in pawn structure?", "Weak square that cannot be defended by pawns", reward=10),
    Q(112, "Name the tactic: line-clearance for another piece.", "Clearance", reward=10),
    Q(113, "Name the tactic: 'windmill' with rook/bishop discovering checks.", "Windmill", reward=15),
    Q(114, "What is the most valuable piece?", "King", reward=5),
    Q(115, "What is a draw by insufficient mating material?", "Insufficient material", reward=10),
    Q(116, "What is perpetual pursuit?", "Repeated threats to force draw", reward=10),
    Q(117, "What is a hook pawn?", "Pawn used to create pawn storms", reward=10),
    Q(118, "What is a minority attack?", "Using fewer pawns to attack more pawns", reward=10),
    Q(119, "What is the strongest square for knights usually?", "Outposts in center", reward=10),
    Q(120, "What is the rook on the seventh rank called?", "Rook on seventh", aliases=("rook on 7th",), reward=10),
    Q(121, "Name the endgame: rook vs pawn with king support is often drawn if pawn is rook pawn.", "Rook vs rook pawn draw", reward=15),
    Q(122, "What is opposition diagonal called for bishops?", "Opposite-colored bishops", reward=10),
    Q(123, "Opposite-colored bishops endgames often result in what?", "Draw", reward=10),
    Q(124, "Same-colored bishops endgames are often decided by what?", "Pawn breaks and zugzwang", reward=15),
    Q(125, "Name the opening line: 1. e4 e5 2. Nf3 Nc6 3. d4.", "Scotch Game", aliases=("scotch",), reward=15),
    Q(126, "Name the defense: 1. e4 c5 2. Nf3 d6 3. d4 cxd4 4. Nxd4 Nf6 5. Nc3 a6.", "Najdorf", aliases=("sicilian najdorf",), reward=15),
    Q(127, "Name the line: 1. e4 e5 2. Nf3 Nc6 3. Bb5 a6.", "Ruy Lopez, Morphy Defense", aliases=("morphy defense",), reward=15),
    Q(128, "Name the gambit: 1. d4 d5 2. c4 e6 3. Nc3 c5.", "Tarrasch Defense", aliases=("tarrasch",), reward=15),
    Q(129, "Name the opening: 1. d4 Nf6 2. c4 e6 3. Nc3 Bb4.", "Nimzo-Indian Defense", reward=15),
    Q(130, "Name the opening: 1. d4 Nf6 2. c4 g6 3. g3.", "Fianchetto King's Indian", aliases=("kings indian fianchetto",), reward=15),
    Q(131, "Name the pawn structure with pawns on c3/d4/e3.", "Stonewall-like (London) structure", aliases=("stonewall", "london"), reward=10),
    Q(132, "Name the tactic: overload a defender to win material.", "Overloading", reward=10),
    Q(133, "Name the tactic: prevent castling by pinning f-pawn or attacking g-pawn.", "King safety attack", reward=10),
    Q(134, "What is the main goal of the opening?", "Development and king safety", reward=10),
    Q(135, "What is the main goal of the middlegame?", "Create weaknesses and attack", reward=10),
    Q(136, "What is the main goal of the endgame?", "Push passed pawns and activate king", reward=10),
    Q(137, "What is the term for exchanging queens early?", "Early queen trade", aliases=("queen trade",), reward=10),
    Q(138, "What is the best piece to blockade passed pawns?", "Knight", reward=10),
    Q(139, "What is the tactic theme when king is trapped by own pieces?", "Self-mate motifs", reward=10),
    Q(140, "What is the term for a pawn storm?", "Pawn storm", reward=10),
    Q(141, "What is the Dutch Leningrad setup's key pawn?", "f-pawn", aliases=("leningrad key pawn",), reward=10),
    Q(142, "Which opening features the Botvinnik setup c4, e4, d3, Nc3, g3?", "English, Botvinnik System", aliases=("botvinnik",), reward=15),
    Q(143, "Which defense uses ...c5 against 1.d4?", "Benoni Defense", aliases=("benoni",), reward=15),
    Q(144, "Which defense uses ...b5 early against 1.d4 c4?", "Budapest Gambit", aliases=("budapest",), reward=15),
    Q(145, "Which system is known for solid pawn chain d5-e6?", "French Defense", reward=10),
    Q(146, "Name the tactic: removing the defender with a capture.", "Remove the defender", aliases=("deflection",), reward=10),
    Q(147, "Name the classic endgame study composer: Troitsky.", "Alexey Troitsky", aliases=("troitsky",), reward=10),
    Q(148, "What is the Troitsky line about?", "Knight vs two connected passed pawns", reward=15),
    Q(149, "What is an exchange up?", "Having a rook for a minor piece", reward=10),
    Q(150, "What is a material imbalance?", "Unequal material values", reward=10),
    Q(151, "What is fortress?", "Defensive setup preventing progress", reward=15),
    Q(152, "What is the term for pre-move in online chess?", "Premove", reward=5),
    Q(153, "What is castling condition about moving king or rook previously?", "Cannot castle if moved before", reward=15),
    Q(154, "What is the term for pin against the king?", "Absolute pin", reward=10),
    Q(155, "What is the term for pin against a queen or rook?", "Relative pin", reward=10),
    Q(156, "What is time trouble called?", "Zeitnot", reward=10),
    Q(157, "What is the move repetition draw rule?", "Threefold repetition", reward=15),
    Q(158, "Name the defense: 1. d4 Nf6 2. c4 e5.", "Budapest Gambit", reward=15),
    Q(159, "Name the defense: 1. d4 c5.", "Benoni Defense", reward=15),
    Q(160, "Name the defense: 1. d4 d6 2. c4 e5.", "Old Indian Defense", aliases=("old indian",), reward=15),
    Q(161, "Name the opening: 1. e4 Nf6.", "Alekhine Defense", aliases=("alekhine",), reward=15),
    Q(162, "Name the opening: 1. e4 Nc6.", "Nimzowitsch Defense", aliases=("nimzowitsch",), reward=15),
    Q(163, "Name the opening: 1. e4 e5 2. Nf3 Nc6 3. d3.", "King's Pawn, Old Italian", aliases=("old italian",), reward=15),
    Q(164, "Name the opening: 1. e4 e5 2. Nf3 Nf6.", "Petrov Defense", aliases=("russian",), reward=15),
    Q(165, "Name the opening: 1. e4 e5 2. Qh5.", "Parham Attack", aliases=("parham",), reward=10),
    Q(166, "Name the opening: 1. e4 e5 2. Qf3.", "Wayward Queen Attack", aliases=("wayward queen",), reward=10),
    Q(167, "Name the opening: 1. e4 d5 2. exd5 Qxd5 3. Nc3.", "Scandinavian Defense, Mieses-Kotrc", aliases=("scandi",), reward=15),
    Q(168, "Name the opening: 1. d4 d5 2. c4 dxc4.", "Queen's Gambit Accepted", aliases=("qga",), reward=15),
    Q(169, "Name the opening: 1. d4 d5 2. c4 e5.", "Albin Counter-Gambit", aliases=("albin",), reward=15),
    Q(170, "Name the opening: 1. e4 c5 2. Nf3 Nc6 3. Bb5.", "Sicilian Rossolimo", aliases=("rossolimo",), reward=15),
    Q(171, "Name the opening: 1. e4 c5 2. Nf3 d6 3. d4 cxd4 4. Nxd4 Nf6 5. Nc3 g6.", "Sicilian Dragon", aliases=("dragon",), reward=15),
    Q(172, "Name the opening: 1. e4 c5 2. Nf3 e6 3. d4 cxd4 4. Nxd4 a6.", "Sicilian Kan", aliases=("kan",), reward=15),
    Q(173, "Name the opening: 1. e4 c5 2. Nf3 e6 3. d4 cxd4 4. Nxd4 Nc6.", "Sicilian Taimanov", aliases=("taimanov",), reward=15),
    Q(174, "Name the opening: 1. e4 c5 2. Nf3 d6 3. c3.", "Sicilian Alapin", aliases=("alapin",), reward=15),
    Q(175, "Name the tactic: attack along the long diagonal a1-h8 or h1-a8.", "Diagonal attack", reward=10),
    Q(176, "Name the tactic: mating net around the king.", "Mating net", reward=10),
    Q(177, "Name the tactic: push passed pawn supported by pieces.", "Pawn push", reward=10),
    Q(178, "Name the tactic: simplify to winning endgame.", "Simplification", reward=10),
    Q(179, "Name the tactic: exchange into favorable structure.", "Structural transformation", reward=10),
    Q(180, "What is the best piece in open positions?", "Bishop", reward=10),
    Q(181, "What is the best piece in closed positions?", "Knight", reward=10),
    Q(182, "What is the main principle of two weaknesses?", "Create a second front to overload defense", reward=15),
    Q(183, "Name the defense system with pawns on d6/e5/f7 and g6.", "Pirc/Modern setup", reward=10),
    Q(184, "Name the sacrifice on b5/b4 to open files in Sicilian.", "Exchange sacrifice on c3", aliases=("xc3 sac",), reward=15),
    Q(185, "Name the tactic: capturing on h7/h2 to drag king out.", "Bishop sacrifice on h7/h2", reward=15),
    Q(186, "Name the endgame: king and pawn vs king key technique.", "Opposition and square of the pawn", reward=15),
    Q(187, "Name the ending: rook and bishop vs rook is usually a draw.", "Rook and bishop vs rook draw", reward=15),
    Q(188, "Name the ending: rook and knight vs rook drawish?", "Rook and knight vs rook often draw", reward=15),
    Q(189, "Name the ending: queen vs rook with poor king placement is winning for queen.", "Queen vs rook win", reward=15),
    Q(190, "Name the tactic: interference on defensive line.", "Interference", reward=10),
    Q(191, "Name the tactic: sacrifice to remove king safety.", "King hunt", reward=10),
    Q(192, "Name the tactic: clearing a file for rook penetration.", "File clearance", reward=10),
    Q(193, "Name the tactic: delaying recapture to play a stronger move.", "Intermediate move", aliases=("zwischenzug",), reward=15),
    Q(194, "Name the tactic: mate threats that force a win of material.", "Mating threats", reward=10),
    Q(195, "Name the tactic: pin and win a piece.", "Pin tactic", reward=10),
    Q(196, "Name the tactic: skewer to win major piece.", "Skewer tactic", reward=10),
    Q(197, "Name the tactic: discovered attack on queen.", "Discovered attack", reward=10),
    Q(198, "Name the tactic: fork with knight on queen and rook.", "Knight fork", reward=10),
    Q(199, "Name the tactic: back rank mating pattern", "Back rank mate", reward=10),
    Q(200, "Name the opening strategy: put pressure on d4 in Sicilian.", "Pressure on d4", reward=10),
    Q(201, "Name the opening strategy: advance e5 in French to gain space.", "Space advantage", reward=10),
    Q(202, "Name the opening strategy: break with c4 in Queen's Gambit structures.", "c4 break", reward=10),
    Q(203, "Name the player known for King's Indian mastery.", "Garry Kasparov", aliases=("kasparov",), reward=10),
    Q(204, "Name the player known as the Wizard of Riga.", "Mikhail Tal", aliases=("tal",), reward=10),
    Q(205, "Name the player known for deep strategy and endgames.", "Jose Raul Capablanca", aliases=("capablanca",), reward=10),
    Q(206, "Name the player who authored 'How to Reassess Your Chess'.", "Jeremy Silman", aliases=("silman",), reward=10),
    Q(207, "Name the tournament: Candidates determines challenger for world title.", "Candidates Tournament", aliases=("candidates",), reward=10),
    Q(208, "Name the defense with black playing ...e5 against 1. d4.", "Budapest Gambit", reward=15),
    Q(209, "Name the defense with black playing ...c5 vs 1. d4.", "Benoni Defense", reward=15),
    Q(210, "Name the defense featuring ...b6 and ...Bb7 vs 1. e4.", "Owen's Defense", reward=15),
    Q(211, "Name the endgame concept: 'rule of the square'.", "Square of the pawn", reward=15),
    Q(212, "Name the basic mating pattern with two bishops.", "Two bishops mate", reward=15),
    Q(213, "Name the principle: don't move pawns in front of your king unnecessarily.", "King safety", reward=10),
    Q(214, "Name the principle: centralize your pieces.", "Centralization", reward=10),
    Q(215, "Name the principle: avoid placing knights on the rim.", "Knight on the rim is dim", reward=10),
    Q(216, "Name the principle: rooks belong behind passed pawns.", "Rooks behind passed pawns", reward=10),
    Q(217, "Name the principle: opposite side castling often leads to pawn storms.", "Opposite side castling", reward=10),
    Q(218, "Name the principle: don't grab poisoned pawns.", "Poisoned pawn", reward=10),
    Q(219, "Name the Sicilian line with Qb6 hitting b2.", "Poisoned Pawn Najdorf", aliases=("poisoned pawn",), reward=15),
    Q(220, "Name the defense: 1. e4 d6 2. d4 Nf6 3. Nc3 g6.", "Pirc Defense", reward=15),
    Q(221, "Name the opening: 1. e4 e5 2. Nf3 Nc6 3. Bc4 Nf6.", "Two Knights Defense", aliases=("two knights",), reward=15),
    Q(222, "Name the trap in the Two Knights with Ng5 and Bxf7+.", "Fried Liver Attack", aliases=("fried liver",), reward=15),
    Q(223, "Name the declined version avoiding fried liver: 3...d6.", "Steinitz Defense", aliases=("steinitz",), reward=10),
    Q(224, "Name the tactic: attacking pinned knight on f6 in Sicilian.", "Pin and pressure", reward=10),
    Q(225, "Name the tactic: queen sacrifice leading to forced mate.", "Queen sacrifice mate", reward=15),
    Q(226, "Name the endgame: rook vs rook with extra pawn typically winning.", "Lucena position", aliases=("lucena",), reward=15),
    Q(227, "Name the defensive endgame method building a bridge.", "Lucena technique", reward=15),
    Q(228, "Name the defensive endgame fortress against rook ending.", "Philidor position", aliases=("philidor position",), reward=15),
    Q(229, "Name the concept: second rank weakness around your king.", "Back rank weakness", reward=10),
    Q(230, "Name the motif: knight outpost on d5 in Sicilian structures.", "d5 outpost", reward=10),
    Q(231, "Name the motif: pawn break f4/f5 in King’s Indian.", "f-pawn break", reward=10),
    Q(232, "Name the motif: c5 break in French to hit d4.", "c5 break", reward=10),
    Q(233, "Name the motif: e4/e5 break to open center.", "Center break", reward=10),
    Q(234, "Name the motif: long castle opposite side attack.", "Pawn storm", reward=10),
    Q(235, "Name the motif: rook lift along the third rank.", "Rook lift", reward=10),
    Q(236, "Name the motif: exchange sacrifice on c3 in Sicilian.", "Exchange sac on c3", reward=15),
    Q(237, "Name the motif: bishop sacrifice on h7 for attack.", "Greek gift", reward=15),
    Q(238, "Name the motif: knight sacrifice on f7/f2.", "Knight sacrifice on f7", reward=15),
    Q(239, "Name the motif: rook sacrifice on h8/h1 for attack.", "Rook sacrifice", reward=15),
    Q(240, "Name the motif: clearance of g-file for rook attack.", "g-file clearance", reward=10),
    Q(241, "Name the motif: bishop on long diagonal b1-h7 attack.", "Long diagonal attack", reward=10),
    Q(242, "Name the motif: queen and knight attack on h7/h2.", "Q+N attack", reward=10),
    Q(243, "Name the motif: mating net with queen and rook.", "Queen-rook mate", reward=10),
    Q(244, "Name the motif: mating net with rook rook (ladder).", "Ladder mate", reward=10),
    Q(245, "Name the motif: discovered attack with bishop and rook.", "Discovered attack", reward=10),
    Q(246, "Name the motif: remove the guard and win material.", "Deflection", reward=10),
    Q(247, "Name the motif: trapping a piece with pawns.", "Trapping", reward=10),
    Q(248, "Name the motif: overprotecting a strong square.", "Overprotection", reward=10),
    Q(249, "Name the motif: break with b4/b5 in queenside structures.", "Queenside pawn break", reward=10),
    Q(250, "Name the motif: break with f4/f5 in kingside structures.", "Kingside pawn break", reward=10),
    Q(251, "Name the motif: rook on open file penetrates to 7th.", "Rook penetration", reward=10),
    Q(252, "Name the motif: double rooks on a file.", "Rook doubling", reward=10),
    Q(253, "Name the motif: queen-side minority attack in Carlsbad.", "Minority attack", reward=15),
    Q(254, "Name the motif: bishop pair advantage.", "Bishop pair", reward=10),
    Q(255, "Name the motif: knight vs bad bishop in closed positions.", "Good knight vs bad bishop", reward=10),
    Q(256, "Name the motif: rook behind passed pawn.", "Rook behind passed pawn", reward=10),
    Q(257, "Name the motif: king activity in endgame.", "Active king", reward=10),
    Q(258, "Name the motif: triangulation to win tempo.", "Triangulation", reward=15),
    Q(259, "Name the motif: zugzwang to force concessions.", "Zugzwang", reward=15),
    Q(260, "Name the motif: perpetual check to draw.", "Perpetual check", reward=15),
    Q(261, "Name the motif: stalemate resource to draw.", "Stalemate", reward=15),
    Q(262, "Name the motif: fortress to hold a draw.", "Fortress", reward=15),
    Q(263, "Name the motif: squeeze technique improving positions slowly.", "Positional squeeze", reward=10),
    Q(264, "Name the motif: prophylaxis preventing opponent's ideas.", "Prophylaxis", reward=10),
    Q(265, "Name the motif: interference to block lines.", "Interference", reward=10),
    Q(266, "Name the motif: clearance sacrifice.", "Clearance sacrifice", reward=15),
    Q(267, "Name the motif: attraction decoy.", "Decoy", reward=10),
    Q(268, "Name the motif: double attack with queen.", "Double attack", reward=10),
    Q(269, "Name the motif: skewer against king and rook.", "Skewer", reward=10),
    Q(270, "Name the motif: pin against queen.", "Relative pin", reward=10),
    Q(271, "Name the motif: absolute pin against king.", "Absolute pin", reward=10),
    Q(272, "Name the motif: underpromotion to knight to avoid stalemate.", "Underpromotion", reward=15),
    Q(273, "Name the motif: square of the pawn in king and pawn endings.", "Square of the pawn", reward=15),
    Q(274, "Name the motif: building bridge in rook endings.", "Lucena", reward=15),
    Q(275, "Name the motif: defensive technique against rook + pawn.", "Philidor", reward=15),
    Q(276, "Name the motif: opposition in pawn endings.", "Opposition", reward=15),
    Q(277, "Name the motif: queen sacrifice to force mate.", "Queen sac mate", reward=15),
    Q(278, "Name the motif: bishop and knight mate technique.", "Bishop and knight mate", reward=15),
    Q(279, "Name the motif: rook roller ladder mate.", "Rook roller", reward=10),
    Q(280, "Name the motif: smothered mate pattern with knight.", "Smothered mate", reward=15),
    Q(281, "Name the motif: mate net with Qh7+ or Qh2+", "Greek gift ideas", reward=15),
    Q(282, "Name the opening: 1. d4 Nf6 2. c4 c5.", "Benoni/Benko ideas", aliases=("benko",), reward=15),
    Q(283, "Name the opening: 1. d4 Nf6 2. c4 c5 3. d5 b5.", "Benko Gambit", aliases=("benko",), reward=15),
    Q(284, "Name the opening: 1. d4 f5 2. c4 Nf6 3. g3.", "Dutch, Leningrad", aliases=("leningrad",), reward=15),
    Q(285, "Name the opening: 1. d4 d5 2. Bf4.", "London System", reward=15),
    Q(286, "Name the opening: 1. d4 d5 2. c4 e6 3. Nc3 Be7.", "QGD Orthodox", aliases=("orthodox",), reward=15),
    Q(287, "Name the opening: 1. e4 e5 2. Nf3 Nc6 3. Bb5 Nf6.", "Berlin Defense", aliases=("berlin",), reward=15),
    Q(288, "Name the opening: 1. e4 e5 2. Nf3 Nc6 3. Bb5 d6.", "Steinitz Defense (Ruy)", reward=15),
    Q(289, "Name the opening: 1. e4 e5 2. Nf3 Nc6 3. Bb5 g6.", "Ruy Lopez, Smyslov Defense", aliases=("smyslov",), reward=15),
    Q(290, "Name the opening: 1. e4 e5 2. Nf3 Nc6 3. Bb5 Bc5.", "Ruy Lopez, Classical", aliases=("classical",), reward=15),
    Q(291, "Name the opening: 1. e4 e5 2. Nf3 Nc6 3. Bb5 a6 4. Ba4 Nf6.", "Ruy Lopez, Closed", aliases=("closed ruy",), reward=15),
    Q(292, "Name the opening: 1. e4 e5 2. Nf3 Nc6 3. Bb5 a6 4. Ba4 b5.", "Ruy Lopez, Arkhangelsk", aliases=("arkhangelsk",), reward=15),
    Q(293, "Name the opening: 1. e4 e5 2. Nf3 Nc6 3. Bb5 Nd4.", "Ruy Lopez, Bird Defense", aliases=("bird defense",), reward=15),
    Q(294, "Name the opening: 1. e4 e5 2. Nf3 Nc6 3. Bb5 f5.", "Ruy Lopez, Schliemann Defense", aliases=("schliemann",), reward=15),
    Q(295, "Name the opening: 1. e4 c5 2. c3.", "Sicilian Alapin", reward=15),
    Q(296, "Name the opening: 1. e4 c5 2. Nc3.", "Sicilian Closed", aliases=("closed sicilian",), reward=15),
    Q(297, "Name the opening: 1. e4 c5 2. d4 cxd4 3. c3.", "Sicilian Smith-Morra", aliases=("smith morra",), reward=15),
    Q(298, "Name the opening: 1. e4 Nf6 2. e5 Nd5.", "Alekhine Defense, Modern", reward=15),
    Q(299, "Name the opening: 1. e4 e5 2. Nf3 Nc6 3. Bc4 Bc5.", "Italian Game, Giuoco Piano", aliases=("giuoco piano",), reward=15),
    Q(300, "Name the opening: 1. e4 e5 2. Nf3 Nc6 3. Bc4 Nf6.", "Italian, Two Knights Defense", aliases=("two knights",), reward=15),
)

QUIZ_BY_ID: dict[int, QuizQuestion] = {q.id: q for q in QUIZ_POOL}
