class Config:

    # =====================
    # Playground Network
    # =====================
    hidden_layers = [3, 4, 3]
    learning_rate = 0.03
    activation = "tanh"               # relu | tanh | sigmoid | linear
    regularization = "none"           # none | l1 | l2
    regularization_rate = 0.0

    # =====================
    # Dataset
    # =====================
    dataset = "circle"                # circle | xor | gauss | spiral
    num_samples = 200
    noise = 0
    train_split = 50                  # Percentage of samples used for training
    features = ["x", "y"]

    # =====================
    # Training
    # =====================
    batch_size = 16

    # =====================
    # Living Network
    # =====================
    initial_neurons = 12
    neuron_learning_rate = 0.1
    max_initial_connections = 3
    base_sphere_radius = 3.0

    # =====================
    # Algorithms
    # =====================
    algorithm = "wave-propagation"

    # =====================
    # Driver
    # =====================
    run_seconds = 10.0
    algorithm_fps = 60
    training_fps = 5
    aging_interval = 1.0             # Seconds between aging ticks

    # =====================
    # Output
    # =====================
    log_path = "out/playground.log"
    stats_path = "out/stats.csv"
