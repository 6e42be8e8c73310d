"""Vocabularies of the arXiv API: sort criteria, sort orders and categories."""

from enum import Enum


class SortBy(str, Enum):
    """Sort criteria for search results."""

    RELEVANCE = "relevance"
    LAST_UPDATED_DATE = "lastUpdatedDate"
    SUBMITTED_DATE = "submittedDate"


class SortOrder(str, Enum):
    """Sort order for search results."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


class Category(str, Enum):
    """arXiv subject categories."""

    # Computer Science
    CS_AI = "cs.AI"  # Artificial Intelligence
    CS_AR = "cs.AR"  # Hardware Architecture
    CS_CC = "cs.CC"  # Computational Complexity
    CS_CE = "cs.CE"  # Computational Engineering, Finance, and Science
    CS_CG = "cs.CG"  # Computational Geometry
    CS_CL = "cs.CL"  # Computation and Language
    CS_CR = "cs.CR"  # Cryptography and Security
    CS_CV = "cs.CV"  # Computer Vision and Pattern Recognition
    CS_CY = "cs.CY"  # Computers and Society
    CS_DB = "cs.DB"  # Databases
    CS_DC = "cs.DC"  # Distributed, Parallel, and Cluster Computing
    CS_DL = "cs.DL"  # Digital Libraries
    CS_DM = "cs.DM"  # Discrete Mathematics
    CS_DS = "cs.DS"  # Data Structures and Algorithms
    CS_ET = "cs.ET"  # Emerging Technologies
    CS_FL = "cs.FL"  # Formal Languages and Automata Theory
    CS_GL = "cs.GL"  # General Literature
    CS_GR = "cs.GR"  # Graphics
    CS_GT = "cs.GT"  # Computer Science and Game Theory
    CS_HC = "cs.HC"  # Human-Computer Interaction
    CS_IR = "cs.IR"  # Information Retrieval
    CS_IT = "cs.IT"  # Information Theory
    CS_LG = "cs.LG"  # Machine Learning
    CS_LO = "cs.LO"  # Logic in Computer Science
    CS_MA = "cs.MA"  # Multiagent Systems
    CS_MM = "cs.MM"  # Multimedia
    CS_MS = "cs.MS"  # Mathematical Software
    CS_NA = "cs.NA"  # Numerical Analysis
    CS_NE = "cs.NE"  # Neural and Evolutionary Computing
    CS_NI = "cs.NI"  # Networking and Internet Architecture
    CS_OH = "cs.OH"  # Other Computer Science
    CS_OS = "cs.OS"  # Operating Systems
    CS_PF = "cs.PF"  # Performance
    CS_PL = "cs.PL"  # Programming Languages
    CS_RO = "cs.RO"  # Robotics
    CS_SC = "cs.SC"  # Symbolic Computation
    CS_SD = "cs.SD"  # Sound
    CS_SE = "cs.SE"  # Software Engineering
    CS_SI = "cs.SI"  # Social and Information Networks
    CS_SY = "cs.SY"  # Systems and Control

    # Economics
    ECON_EM = "econ.EM"  # Econometrics
    ECON_GN = "econ.GN"  # General Economics
    ECON_TH = "econ.TH"  # Theoretical Economics

    # Electrical Engineering and Systems Science
    EESS_AS = "eess.AS"  # Audio and Speech Processing
    EESS_IV = "eess.IV"  # Image and Video Processing
    EESS_SP = "eess.SP"  # Signal Processing
    EESS_SY = "eess.SY"  # Systems and Control

    # Mathematics
    MATH_AC = "math.AC"  # Commutative Algebra
    MATH_AG = "math.AG"  # Algebraic Geometry
    MATH_AP = "math.AP"  # Analysis of PDEs
    MATH_AT = "math.AT"  # Algebraic Topology
    MATH_CA = "math.CA"  # Classical Analysis and ODEs
    MATH_CO = "math.CO"  # Combinatorics
    MATH_CT = "math.CT"  # Category Theory
    MATH_CV = "math.CV"  # Complex Variables
    MATH_DG = "math.DG"  # Differential Geometry
    MATH_DS = "math.DS"  # Dynamical Systems
    MATH_FA = "math.FA"  # Functional Analysis
    MATH_GM = "math.GM"  # General Mathematics
    MATH_GN = "math.GN"  # General Topology
    MATH_GR = "math.GR"  # Group Theory
    MATH_GT = "math.GT"  # Geometric Topology
    MATH_HO = "math.HO"  # History and Overview
    MATH_IT = "math.IT"  # Information Theory
    MATH_KT = "math.KT"  # K-Theory and Homology
    MATH_LO = "math.LO"  # Logic
    MATH_MG = "math.MG"  # Metric Geometry
    MATH_MP = "math.MP"  # Mathematical Physics
    MATH_NA = "math.NA"  # Numerical Analysis
    MATH_NT = "math.NT"  # Number Theory
    MATH_OA = "math.OA"  # Operator Algebras
    MATH_OC = "math.OC"  # Optimization and Control
    MATH_PR = "math.PR"  # Probability
    MATH_QA = "math.QA"  # Quantum Algebra
    MATH_RA = "math.RA"  # Rings and Algebras
    MATH_RT = "math.RT"  # Representation Theory
    MATH_SG = "math.SG"  # Symplectic Geometry
    MATH_SP = "math.SP"  # Spectral Theory
    MATH_ST = "math.ST"  # Statistics Theory

    # Physics - Astrophysics
    ASTRO_PH = "astro-ph"  # Astrophysics (general)
    ASTRO_PH_CO = "astro-ph.CO"  # Cosmology and Nongalactic Astrophysics
    ASTRO_PH_EP = "astro-ph.EP"  # Earth and Planetary Astrophysics
    ASTRO_PH_GA = "astro-ph.GA"  # Astrophysics of Galaxies
    ASTRO_PH_HE = "astro-ph.HE"  # High Energy Astrophysical Phenomena
    ASTRO_PH_IM = "astro-ph.IM"  # Instrumentation and Methods for Astrophysics
    ASTRO_PH_SR = "astro-ph.SR"  # Solar and Stellar Astrophysics

    # Physics - Condensed Matter
    COND_MAT = "cond-mat"  # Condensed Matter (general)
    COND_MAT_DIS_NN = "cond-mat.dis-nn"  # Disordered Systems and Neural Networks
    COND_MAT_MES_HALL = "cond-mat.mes-hall"  # Mesoscale and Nanoscale Physics
    COND_MAT_MTRL_SCI = "cond-mat.mtrl-sci"  # Materials Science
    COND_MAT_OTHER = "cond-mat.other"  # Other Condensed Matter
    COND_MAT_QUANT_GAS = "cond-mat.quant-gas"  # Quantum Gases
    COND_MAT_SOFT = "cond-mat.soft"  # Soft Condensed Matter
    COND_MAT_STAT_MECH = "cond-mat.stat-mech"  # Statistical Mechanics
    COND_MAT_STR_EL = "cond-mat.str-el"  # Strongly Correlated Electrons
    COND_MAT_SUPR_CON = "cond-mat.supr-con"  # Superconductivity

    # Physics - General Relativity and Quantum Cosmology
    GR_QC = "gr-qc"  # General Relativity and Quantum Cosmology

    # Physics - High Energy Physics
    HEP_EX = "hep-ex"  # High Energy Physics - Experiment
    HEP_LAT = "hep-lat"  # High Energy Physics - Lattice
    HEP_PH = "hep-ph"  # High Energy Physics - Phenomenology
    HEP_TH = "hep-th"  # High Energy Physics - Theory

    # Physics - Mathematical Physics
    MATH_PH = "math-ph"  # Mathematical Physics

    # Physics - Nonlinear Sciences
    NLIN_AO = "nlin.AO"  # Adaptation and Self-Organizing Systems
    NLIN_CD = "nlin.CD"  # Chaotic Dynamics
    NLIN_CG = "nlin.CG"  # Cellular Automata and Lattice Gases
    NLIN_PS = "nlin.PS"  # Pattern Formation and Solitons
    NLIN_SI = "nlin.SI"  # Exactly Solvable and Integrable Systems

    # Physics - Nuclear Physics
    NUCL_EX = "nucl-ex"  # Nuclear Experiment
    NUCL_TH = "nucl-th"  # Nuclear Theory

    # Physics - General Physics
    PHYSICS_ACC_PH = "physics.acc-ph"  # Accelerator Physics
    PHYSICS_AO_PH = "physics.ao-ph"  # Atmospheric and Oceanic Physics
    PHYSICS_APP_PH = "physics.app-ph"  # Applied Physics
    PHYSICS_ATM_CLUS = "physics.atm-clus"  # Atomic and Molecular Clusters
    PHYSICS_ATOM_PH = "physics.atom-ph"  # Atomic Physics
    PHYSICS_BIO_PH = "physics.bio-ph"  # Biological Physics
    PHYSICS_CHEM_PH = "physics.chem-ph"  # Chemical Physics
    PHYSICS_CLASS_PH = "physics.class-ph"  # Classical Physics
    PHYSICS_COMP_PH = "physics.comp-ph"  # Computational Physics
    PHYSICS_DATA_AN = "physics.data-an"  # Data Analysis, Statistics and Probability
    PHYSICS_ED_PH = "physics.ed-ph"  # Physics Education
    PHYSICS_FLU_DYN = "physics.flu-dyn"  # Fluid Dynamics
    PHYSICS_GEN_PH = "physics.gen-ph"  # General Physics
    PHYSICS_GEO_PH = "physics.geo-ph"  # Geophysics
    PHYSICS_HIST_PH = "physics.hist-ph"  # History and Philosophy of Physics
    PHYSICS_INS_DET = "physics.ins-det"  # Instrumentation and Detectors
    PHYSICS_MED_PH = "physics.med-ph"  # Medical Physics
    PHYSICS_OPTICS = "physics.optics"  # Optics
    PHYSICS_PLASM_PH = "physics.plasm-ph"  # Plasma Physics
    PHYSICS_POP_PH = "physics.pop-ph"  # Popular Physics
    PHYSICS_SOC_PH = "physics.soc-ph"  # Physics and Society
    PHYSICS_SPACE_PH = "physics.space-ph"  # Space Physics

    # Physics - Quantum Physics
    QUANT_PH = "quant-ph"  # Quantum Physics

    # Quantitative Biology
    Q_BIO_BM = "q-bio.BM"  # Biomolecules
    Q_BIO_CB = "q-bio.CB"  # Cell Behavior
    Q_BIO_GN = "q-bio.GN"  # Genomics
    Q_BIO_MN = "q-bio.MN"  # Molecular Networks
    Q_BIO_NC = "q-bio.NC"  # Neurons and Cognition
    Q_BIO_OT = "q-bio.OT"  # Other Quantitative Biology
    Q_BIO_PE = "q-bio.PE"  # Populations and Evolution
    Q_BIO_QM = "q-bio.QM"  # Quantitative Methods
    Q_BIO_SC = "q-bio.SC"  # Subcellular Processes
    Q_BIO_TO = "q-bio.TO"  # Tissues and Organs

    # Quantitative Finance
    Q_FIN_CP = "q-fin.CP"  # Computational Finance
    Q_FIN_EC = "q-fin.EC"  # Economics
    Q_FIN_GN = "q-fin.GN"  # General Finance
    Q_FIN_MF = "q-fin.MF"  # Mathematical Finance
    Q_FIN_PM = "q-fin.PM"  # Portfolio Management
    Q_FIN_PR = "q-fin.PR"  # Pricing of Securities
    Q_FIN_RM = "q-fin.RM"  # Risk Management
    Q_FIN_ST = "q-fin.ST"  # Statistical Finance
    Q_FIN_TR = "q-fin.TR"  # Trading and Market Microstructure

    # Statistics
    STAT_AP = "stat.AP"  # Applications
    STAT_CO = "stat.CO"  # Computation
    STAT_ME = "stat.ME"  # Methodology
    STAT_ML = "stat.ML"  # Machine Learning
    STAT_OT = "stat.OT"  # Other Statistics
    STAT_TH = "stat.TH"  # Statistics Theory

    @property
    def archive(self) -> str:
        """Top-level archive, e.g. "cs" for cs.AI or "cond-mat" for cond-mat.soft."""
        return self.value.split(".", 1)[0]
