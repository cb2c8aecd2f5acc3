# wave_based_method/defaults.py

# 物理常数配置
PHYSICS_PARAMS = {
    'f': 400,               # 频率 (Hz)
    'c': 340,               # 声速 (m/s)
    'rho_air': 1.217,       # 空气密度 (kg/m^3)
}

# 模态截断阶数
MODE_CONFIG = {
    'M': 5,                 # 房间 x 方向模态数
    'N': 5,                 # 房间 y 方向模态数
    'P': 4,                 # 板 x 方向模态数
    'Q': 4                  # 板 y 方向模态数
}

# 每个方向的 Gauss-Legendre 节点数
QUADRATURE_ORDER = 5

# 参考算例: 声源房间 -> 中间房间 -> 接收房间
REFERENCE_ROOMS = [
    {'is_source': True, 'Lx': 5.09, 'Ly': 4.12, 'Lz': 4.15,
     'Xs': 2.0, 'Ys': 1.5, 'Zs': 1.5, 'T': 2.68},
    {'Lx': 5.09, 'Ly': 4.12, 'Lz': 4.15, 'T': 2.68},
    {'is_receiving': True, 'Lx': 5.09, 'Ly': 4.12, 'Lz': 4.15, 'T': 2.68},
]

REFERENCE_PLATE = {
    'Lx': 3.25,
    'Ly': 2.95,
    'delta_x': 0.5,
    'delta_y': 0.5,
    'rho': 2500,
    'h': 0.01,
    'youngs_modulus': 62 * 10e9,
    'poisson_ratio': 0.24
}
